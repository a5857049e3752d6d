from .classifier import Classifier, classify

__all__ = ['Classifier', 'classify']
