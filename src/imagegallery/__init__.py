"""
Image Gallery
=============
A desktop image browser: category filter, free-text search, pagination and a
detail overlay with the image keywords.
"""
