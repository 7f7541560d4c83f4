"""Website availability monitor with a log file."""