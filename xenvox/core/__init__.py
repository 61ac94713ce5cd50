from .ratio import Rational, mediant

__all__ = ['Rational', 'mediant']
