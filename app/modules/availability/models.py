# Availability settings
# No dedicated table. The full settings document lives in the in-process cache
# (app/modules/availability/cache.py); only these profiles columns are synced:

"""
Synced Supabase columns (table: profiles):
- bio: text (nullable) - empty string stored as null
- location: text (nullable) - empty string stored as null
- is_available: boolean (default: true)
"""
