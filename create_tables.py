#!/usr/bin/env python3
"""
Create the catalog tables (productos, productos_imagenes) in the configured database
Usage: python create_tables.py
"""
import sys
import os

# Add the current directory to Python path
sys.path.insert(0, os.path.dirname(__file__))

from database.connection import engine, create_tables, dispose_engine

def create_all_tables():
    """Create all database tables"""
    try:
        print(f"Creating database tables on {engine.url.render_as_string(hide_password=True)}...")
        create_tables()
        print("All tables created successfully!")
        return True
    except Exception as e:
        print(f"Failed to create tables: {e}")
        return False
    finally:
        dispose_engine()

if __name__ == "__main__":
    success = create_all_tables()
    sys.exit(0 if success else 1)
