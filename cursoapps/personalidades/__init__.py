"""Personality records in SQLite and their REST API."""