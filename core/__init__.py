"""
Core Package

Contains the endpoint-agnostic pieces of the client:
- config: Pydantic Settings loaded from the environment / .env
- logging: Logger setup shared by every module
- exceptions: Status-code error hierarchy
- schemas: Request models and public result models
"""
