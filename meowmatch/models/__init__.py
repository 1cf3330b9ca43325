# meowmatch/models/__init__.py
from .cat import Cat, CatAge, CatSize, CatGender
from .adoption_application import AdoptionApplication
from .shelter import Shelter
from .user_role import UserRole, EDITOR_ROLES

__all__ = [
    'Cat', 'CatAge', 'CatSize', 'CatGender',
    'AdoptionApplication', 'Shelter',
    'UserRole', 'EDITOR_ROLES'
]
