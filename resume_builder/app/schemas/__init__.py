"""Request and response models for the versioned JSON API.

Every model serializes with camelCase keys and accepts either camelCase or
snake_case on input.

"""
