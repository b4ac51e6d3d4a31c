# Assets
# No table. Assets are the caller's rows in projects (see app/modules/projects/models.py);
# media bytes are downloaded from the public storage bucket settings.storage_bucket.
