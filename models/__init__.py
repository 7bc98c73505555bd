from models.db_storage import DBStorage

# process-wide storage; each thread gets its own scoped session
storage = DBStorage()
storage.reload()
