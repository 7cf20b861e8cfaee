"""
Session Count Authenticator Constants

Wire tags and fixed values shared with the external session-store service.
Changing any of these changes the query format the session store expects.
"""

# Query clause tags
TENANT_DOMAIN_TAG = "tenantDomain"
USERNAME_TAG = "username"
USER_STORE_TAG = "userStore"
ATTRIBUTE_SEPARATOR = ":"
AND_TAG = "&"

# Table search request body
TABLE_NAME_TAG = "tableName"
QUERY_TAG = "query"
START_TAG = "start"
COUNT_TAG = "count"
ACTIVE_SESSION_TABLE_NAME = "ORG_WSO2_IS_ANALYTICS_STREAM_ACTIVESESSIONS"
START_INDEX = 0
SESSION_COUNT_MAX = 100

# Headers
AUTHORIZATION_HEADER = "Authorization"
AUTH_TYPE_KEY = "Basic "
CONTENT_TYPE_TAG = "Content-Type"
CONTENT_TYPE_JSON = "application/json"

# Authentication endpoint pages
LOGIN_STANDARD_PAGE = "login.do"
SESSION_TERMINATION_ENFORCER_PAGE = "session-termination-enforcer.jsp"
