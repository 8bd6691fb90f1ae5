"""Random User API field and parameter names."""

# Envelope
RESULTS = "results"
ERROR = "error"

# Nested user fields
LOGIN = "login"
LOGIN_UUID = "uuid"
NAME = "name"
NAME_FIRST = "first"
NAME_LAST = "last"
DOB = "dob"
DOB_AGE = "age"
LOCATION = "location"
CITY = "city"
COUNTRY = "country"
EMAIL = "email"
PHONE = "phone"
CELL = "cell"
GENDER = "gender"
NAT = "nat"

# Government id block: {"name": "SSN", "value": "..."}; value may be null
ID = "id"
ID_VALUE = "value"

# Only request what normalization reads
INCLUDE_FIELDS = ",".join((GENDER, NAME, LOCATION, EMAIL, LOGIN, DOB, PHONE, CELL, NAT))
