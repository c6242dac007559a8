"""MayaStory account service: registration and login over PostgreSQL."""
