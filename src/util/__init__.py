"""
Where: `util` package.
What: standalone helpers without huescale imports (color-string parsing, paths).
"""
