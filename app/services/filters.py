from typing import TypeAlias

from sqlalchemy import ColumnElement


FilterType: TypeAlias = ColumnElement[bool]
