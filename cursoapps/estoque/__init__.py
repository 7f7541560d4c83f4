"""In-memory inventory with an audit log, suppliers and a demonstration command."""