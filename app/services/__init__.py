"""Service layer package housing core business logic.

Contains the JSON entry/topic store, entry creation and lookup, topic
statistics, writing-profile analysis and the AI suggestion engine with its
request-level wrapper. Each service is built per request by the routes.
"""
