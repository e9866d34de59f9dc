"""
Dashboard app

Purpose: Admin panel for editing the profile, skills, journey and projects,
gated on the admin's auth session.
"""
