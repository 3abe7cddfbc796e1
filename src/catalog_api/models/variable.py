from sqlalchemy import String, Text, Boolean, Integer, JSON
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from catalog_api.database.base import Base, CatalogEntityMixin
from .enums import ValueType, VariableStatus, RollingVersion, enum_column_type


class Variable(CatalogEntityMixin, Base):
    """
    A variable (column) of a dictionary table.
    """
    __tablename__ = "variable"

    # Reference to DictTable
    table_id: Mapped[int] = mapped_column(Integer, index=True, nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Fully qualified path (unique)
    path: Mapped[str] = mapped_column(String(500), unique=True, nullable=False)

    value_type: Mapped[ValueType] = mapped_column(enum_column_type(ValueType), nullable=False)

    label_en: Mapped[str] = mapped_column(String(500), nullable=False)
    label_fr: Mapped[str] = mapped_column(String(500), nullable=False)

    # Optional reference to ValueSet
    value_set_id: Mapped[int | None] = mapped_column(Integer, index=True, nullable=True)

    # Ids of the variables this one is derived from (int[] on Postgres, JSON elsewhere)
    from_variable_id: Mapped[list[int] | None] = mapped_column(
        JSON().with_variant(ARRAY(Integer), "postgresql"),
        nullable=True
    )

    derivation_algorithm: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    variable_status: Mapped[VariableStatus] = mapped_column(
        enum_column_type(VariableStatus),
        nullable=False
    )
    rolling_version: Mapped[RollingVersion] = mapped_column(
        enum_column_type(RollingVersion),
        nullable=False
    )

    to_be_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<Variable(id={self.id!r}, path={self.path!r})>"
