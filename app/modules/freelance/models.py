# Supabase table: freelance_projects
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null) - the freelancer
- title: text (not null)
- client: text (not null)
- status: text (not null, default: 'pending') - values: active, pending, completed, on-hold
- priority: text (not null, default: 'medium') - values: low, medium, high, urgent
- progress: integer (default: 0, 0-100)
- budget: numeric (default: 0)
- deadline: date (nullable)
- description: text (nullable)
- category: text (nullable)
- deliverables: text[] (default: '{}')
- tags: text[] (default: '{}')
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
