"""
Domain vocabularies for citizen records.
Single source of truth for search validation, the ORM columns and the API.
"""

from typing import Literal, get_args

# -----------------------------------------------------------------------------
# Enums
# -----------------------------------------------------------------------------

Gender = Literal["M", "F"]

MaritalStatus = Literal["SINGLE", "MARRIED", "DIVORCED", "WIDOWED"]

RelationType = Literal["SPOUSE", "CHILD", "PARENT", "SIBLING", "OTHER"]

GENDERS = frozenset(get_args(Gender))
MARITAL_STATUSES = frozenset(get_args(MaritalStatus))
RELATION_TYPES = frozenset(get_args(RelationType))

# -----------------------------------------------------------------------------
# Searchable person fields
# -----------------------------------------------------------------------------

# Name parts per script. Script A is Arabic, script B is English.
NAME_FIELDS_AR = ("first_name_ar", "last_name_ar", "father_name_ar", "mother_name_ar")
NAME_FIELDS_EN = ("first_name_en", "last_name_en", "father_name_en", "mother_name_en")

# Related collections on a citizen and the fields searched inside them
PASSPORTS = "passports"
FAMILY_RELATIONSHIPS = "family_relationships"
