"""Item records, their validation, SQLite storage and web API."""