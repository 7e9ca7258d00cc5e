
# THIS FILE IS GENERATED FROM DATADONUTS SETUP.PY
short_version = '0.2.0'
version = '0.2.0'
full_version = '0.2.0'
git_revision = 'Unknown'
release = True

if not release:
    version = full_version
    short_version += ".dev"
