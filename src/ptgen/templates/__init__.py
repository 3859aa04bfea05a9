"""packaged Jinja2 device templates"""
