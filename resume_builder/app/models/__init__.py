import logging

from sqlalchemy.orm import declarative_base

log = logging.getLogger(__name__)

# Base model that other models will inherit from
Base = declarative_base()

# Import all models here to ensure they are registered with SQLAlchemy's metadata
from .certification import Certification  # noqa
from .education import Education  # noqa
from .experience import Experience  # noqa
from .project import Project  # noqa
from .resume_model import Resume  # noqa
from .section import ResumeSection  # noqa
from .skill import Skill  # noqa
