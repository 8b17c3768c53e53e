"""Base fragment and condition definitions.

Fragments and conditions are pure data structures that describe a piece of a
SQL statement. They are turned into text by a renderer; nothing here knows
how. Each concrete variant pins its tag field to a single enum member, and
renderers dispatch on that tag.
"""

from sqlfrags.constants.sql import ConditionType, FragmentType
from sqlfrags.types.base import FragBaseModel


class BaseFragment(FragBaseModel):
    """Base class for all clause-level fragments.

    Attributes:
        fragment_type: Variant tag used by renderers for dispatch
    """
    fragment_type: FragmentType


class BaseCondition(FragBaseModel):
    """Base class for all boolean predicate nodes.

    Attributes:
        condition_type: Variant tag used by renderers for dispatch
    """
    condition_type: ConditionType
