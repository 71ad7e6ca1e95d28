"""FaBudget personal budgeting API."""
