"""
The MODEL layer contains pure data structures and the catalog query logic.
It has NO knowledge of the GUI (Qt) or of animation timing.
"""
