import pytest


@pytest.fixture
def users_table():
    return {
        "users": {
            "isLink": False,
            "timestamp": True,
            "columns": {
                "id": {"type": "increments"},
                "email": {"type": "string", "nullable": False, "unique": True, "length": 255},
            },
            "relations": {},
        }
    }


@pytest.fixture
def blog_schema():
    """users <-> roles through a link table, posts belonging to users."""
    return {
        "users": {
            "timestamp": True,
            "columns": {
                "id": {"type": "increments"},
                "email": {"type": "string", "unique": True, "length": 255},
                "bio": {"type": "mediumText", "nullable": True},
            },
            "relations": {
                "posts": {
                    "type": "hasMany",
                    "relatedModel": "Post",
                    "primaryKey": "id",
                    "foreignKey": "user_id",
                },
                "roles": {
                    "type": "belongsToMany",
                    "relatedModel": "Role",
                    "foreignKey": "user_id",
                    "relatedForeignKey": "role_id",
                    "primaryKey": "id",
                    "relatedPrimaryKey": "id",
                    "pivotTable": "user_roles",
                    "withTimestamps": True,
                },
            },
        },
        "user_roles": {
            "isLink": True,
            "columns": {
                "user_id": {"type": "integer", "unsigned": True, "foreignKey": True},
                "role_id": {"type": "integer", "unsigned": True, "foreignKey": True},
            },
        },
        "posts": {
            "timestamp": False,
            "columns": {
                "id": {"type": "increments"},
                "user_id": {"type": "integer", "unsigned": True, "foreignKey": True},
                "title": {"type": "string", "length": 100},
                "views": {"type": "integer", "unsigned": True, "nullable": True},
                "published_at": {"type": "dateTime", "nullable": True},
            },
            "relations": {
                "author": {
                    "type": "BelongsTo",
                    "relatedModel": "User",
                    "primaryKey": "id",
                    "foreignKey": "user_id",
                },
            },
        },
        "roles": {
            "columns": {
                "id": {"type": "increments"},
                "name": {"type": "string"},
            },
        },
    }
