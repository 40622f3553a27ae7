from tests.test_base import TestBase

__all__ = ['TestBase']
