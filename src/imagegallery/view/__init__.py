"""
The VIEW layer owns everything the user sees. GalleryView mutates element
handles; GalleryWindow (in `widgets`) mirrors those handles onto Qt widgets.
"""
