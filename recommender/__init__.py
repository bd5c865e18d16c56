"""
recommender
-----------
Vector math, item similarity and top-k ranking. Import from the
submodules directly (recommender.recommend, recommender.vector_utils, ...).
"""
