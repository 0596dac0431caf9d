"""
mv_videos - Flatten a nested video collection into one directory.

Moves video files out of nested source directories into a single
flat destination directory by:
- Selecting files by extension and minimum size with find(1)
- Re-checking every discovered file before touching it
- Planning flat destinations and rejecting name collisions
- Moving files one by one (or only reporting them in dry-run mode)
"""

__version__ = "0.3.0"
