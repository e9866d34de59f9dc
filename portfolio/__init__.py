"""
Portfolio app

Purpose: Public single-page site (hero, projects, about, contact) built from
the content stored in the data service.
"""
