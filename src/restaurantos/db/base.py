from sqlalchemy.orm import declarative_base

# Base for all ORM models
Base = declarative_base()
