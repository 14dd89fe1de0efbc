"""School Entry Tracker package.

Organized by feature modules (auth, users, students, entries) with a thin
Flask controller layer over service/repository layers.
"""
