# Supabase table: projects
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
#
# Media files live in the public storage bucket "projects" (settings.storage_bucket).
# Clients upload directly to storage and send the resulting public URL.

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null)
- title: text (not null)
- description: text (nullable)
- image_url: text (nullable) - public storage URL; holds videos too (.mp4, .mov, .avi, .webm)
- category_id: uuid (foreign key to categories.id, nullable)
- likes_count: integer (default: 0) - maintained by triggers on likes
- saves_count: integer (default: 0) - maintained by triggers on saves
- comments_count: integer (default: 0) - maintained by triggers on comments
- views_count: integer (default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Realtime: the table must be part of the supabase_realtime publication for upload notifications.
"""
