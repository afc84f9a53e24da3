"""Users app package.

Defines the custom user model with customer and administrator roles.
Use ``apps.users.models.CustomUser`` as the AUTH_USER_MODEL throughout
the project.
"""
