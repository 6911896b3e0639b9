"""System tables - settings, registry, locales, themes, features, widgets."""

SETTINGS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}settings (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE,
    value VARCHAR,
    default_value VARCHAR,
    type VARCHAR NOT NULL DEFAULT 'string',
    description VARCHAR,
    category VARCHAR
)
"""

REGISTRY_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}registry (
    name VARCHAR PRIMARY KEY,
    value VARCHAR,
    type VARCHAR NOT NULL,
    last_modification BIGINT NOT NULL
)
"""

LOCALES_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}locales (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    folder VARCHAR NOT NULL,
    is_default INTEGER NOT NULL DEFAULT 0
)
"""

THEMES_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}themes (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    folder VARCHAR NOT NULL,
    imageset_folder VARCHAR,
    is_default INTEGER NOT NULL DEFAULT 0
)
"""

FEATURES_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}features (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL UNIQUE,
    enabled INTEGER NOT NULL DEFAULT 1,
    access VARCHAR
)
"""

WIDGETS_DDL = """
CREATE TABLE IF NOT EXISTS {prefix}widgets (
    id INTEGER PRIMARY KEY,
    name VARCHAR NOT NULL,
    title VARCHAR,
    enabled INTEGER NOT NULL DEFAULT 1,
    sort_order INTEGER NOT NULL DEFAULT 0
)
"""
