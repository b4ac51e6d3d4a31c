# Supabase table: hire_posts
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- client_id: uuid (foreign key to profiles.id, not null) - the hirer
- title: text (not null)
- description: text (not null)
- budget: numeric (not null, > 0)
- status: text (not null, default: 'draft') - values: draft, published, in-progress, completed, cancelled
- category: text (nullable)
- skills_required: text[] (default: '{}')
- proposals_count: integer (default: 0)
- deadline: date (nullable)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)

Freelancer discovery reads profiles and projects (see their models.py).
"""
