"""
Shared service plumbing.

- http.py - ``requests.Session`` factory (timeout, User-Agent, retry policy)
"""
