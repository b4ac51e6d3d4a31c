# Supabase tables: likes, saves, comments
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

likes:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- created_at: timestamp (default: now())
- unique (user_id, project_id)

saves:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- created_at: timestamp (default: now())
- unique (user_id, project_id)

comments:
- id: uuid (primary key)
- project_id: uuid (foreign key to projects.id, not null, on delete cascade)
- user_id: uuid (foreign key to profiles.id, not null)
- content: text (not null)
- created_at: timestamp (default: now())

Triggers keep projects.likes_count / saves_count / comments_count in sync.
"""
