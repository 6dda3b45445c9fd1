from app.normalization.normalizer import EntitlementNormalizer, normalize_record, parse_entitlement

__all__ = ["EntitlementNormalizer", "normalize_record", "parse_entitlement"]
