"""Business logic services.

Services contain the aggregation logic and are called by routes.
The ranking service is pure; the catalog service does the store reads.
"""
