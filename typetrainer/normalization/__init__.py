from typetrainer.normalization.normalizer import TextNormalizer, normalize_text

__all__ = ["TextNormalizer", "normalize_text"]
