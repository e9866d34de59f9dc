"""
Backend app

Purpose: Talk to the hosted data service (profiles, skills, journey, projects
and auth sessions) behind a single interface, with a null stand-in used when
no credentials are configured.
"""
