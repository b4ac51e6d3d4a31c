# Supabase Auth
# This module relies on Supabase's built-in authentication system
# No custom tables are required. Clients sign up / sign in against Supabase Auth directly
# and send the resulting access token as a Bearer header.

"""
Used from Supabase Auth:
- auth.get_user(jwt) - resolve the current user from a bearer token

Each auth.users row has a matching public.profiles row (same id) that
holds the public profile; see app/modules/profiles/models.py.
"""
