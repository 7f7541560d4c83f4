"""Student records, their SQLite storage and the web API that serves them."""