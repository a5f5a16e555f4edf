"""Application services that orchestrate the store and the recommender."""
