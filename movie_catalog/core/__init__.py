"""
Core domain logic: the movie catalog and its reviews.
"""
