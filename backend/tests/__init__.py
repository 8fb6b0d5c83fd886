"""
Test Suite

Unit, repository and HTTP tests for the Resume Jobs API.
"""
