"""The ``MetaData`` every panel table attaches to.

Constraint and index names come from :data:`NAMING_CONVENTION`, so the names
in the migration scripts and the names SQLAlchemy would pick for the tables in
:mod:`panelseed.adapters.db.schema` are the same:

| Object       | Name                                   |
|--------------|----------------------------------------|
| primary key  | ``pk_<table>``                         |
| foreign key  | ``fk_<table>_<columns>_<referred>``    |
| unique       | ``uq_<table>_<columns>``               |
| check        | ``ck_<table>_<name>``                  |
| index        | ``ix_<table>_<columns>``               |
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_label)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
