"""Lending and swap transaction pipeline for an oToken money market."""
