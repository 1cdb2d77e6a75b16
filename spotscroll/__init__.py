"""spotscroll package."""
