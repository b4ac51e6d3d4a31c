# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py
#
# One row per auth.users row (same id), created by the on-signup trigger.
# banner_url, website, twitter, instagram, linkedin and is_available were added by later
# migrations; older databases may lack banner_url, which set_banner tolerates.

"""
Expected Supabase table structure:
- id: uuid (primary key, references auth.users.id)
- username: text (not null, unique)
- full_name: text (nullable)
- bio: text (nullable)
- avatar_url: text (nullable)
- banner_url: text (nullable)
- website: text (nullable)
- location: text (nullable)
- twitter: text (nullable)
- instagram: text (nullable)
- linkedin: text (nullable)
- is_available: boolean (default: true)
- followers_count: integer (default: 0)
- created_at: timestamp (default: now())
- updated_at: timestamp (nullable)
"""
