"""Product records in SQLite and the shop web pages."""