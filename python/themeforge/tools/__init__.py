# python/themeforge/tools/__init__.py
# Standalone maintenance tools runnable with ``python -m themeforge.tools.<name>``
# RELEVANT FILES:python/themeforge/tools/check_images.py,tests/test_check_images.py
