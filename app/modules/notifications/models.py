# Notifications
# No table. Inboxes are held in process (app/modules/notifications/hub.py) and filled
# from Supabase Realtime postgres_changes INSERT events on public.projects.

"""
Notification document:
- id: str ("notification_<hex>")
- type: "project_upload"
- project: projects row with embedded profiles and categories
- title: "New Project Uploaded!"
- message: '<username or Someone> uploaded "<title>"'
- category_kind: design | photo | video | music | code | other
- timestamp: datetime (UTC)
- read: bool
"""
