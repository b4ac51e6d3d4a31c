# Supabase table: categories
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- name: text (not null, unique) - e.g. "Graphic Design", "Photography", "Edited Video", "Motion"
- slug: text (nullable)
- description: text (nullable)
- created_at: timestamp (default: now())
"""
