# Upper bound of a SQL INTEGER column; larger values never reach the database.
INT_MAX = 2**31 - 1
