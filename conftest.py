"""Global conftest.py

Placing this file at the top of the tree puts the project directory on
sys.path, so that tests can import ``tests.unittests.helpers``.
"""
