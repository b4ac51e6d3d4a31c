# Supabase tables: jobs, saved_jobs
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

jobs:
- id: uuid (primary key)
- title: text (not null)
- company: text (not null)
- company_logo: text (nullable)
- location: text (not null)
- type: text (nullable) - e.g. Full-time, Contract
- description: text (not null)
- requirements: text[] (default: '{}')
- benefits: text[] (default: '{}')
- salary: text (nullable)
- is_remote: boolean (default: false)
- is_verified: boolean (default: false)
- category: text (nullable)
- posted_at: timestamp (default: now())

saved_jobs:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null)
- job_id: uuid (foreign key to jobs.id, not null, on delete cascade)
- created_at: timestamp (default: now())
- unique (user_id, job_id)
"""
