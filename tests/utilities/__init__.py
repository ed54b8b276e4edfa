"""Tests for graphql_error_fields.utilities"""
