"""Employee Attendance Tracker package.

Organized by feature modules (attendance, health) with a thin Flask
controller layer over service/repository layers backed by MySQL.
"""
