"""
Remote mirror.

- remote_mirror.py: fire-and-forget POST of new tasks (httpx)
- background.py: asyncio loop in a daemon thread that runs those posts
"""
