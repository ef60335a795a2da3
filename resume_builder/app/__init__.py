"""Resume builder application package.

It exposes the HTTP API for managing resumes and the sections and entries
they are composed of: education, experience, projects, skills,
certifications and named resume sections.

"""
