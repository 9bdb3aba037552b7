"""Web and CLI surfaces for the Baseline API checker."""
