"""
Data-ingestion routines for energy and industry modelling inputs.

"""
