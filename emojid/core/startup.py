"""
Startup validation and checks for the EmojiID service
"""

import logging
import re
import sys
from typing import List, Tuple
from emojid.core.config import settings
from emojid.models.alphabet import DEFAULT_ALPHABET, DELIMITER, MIN_ALPHABET_SIZE

logger = logging.getLogger(__name__)

EXPECTED_DEFAULT_ALPHABET_SIZE = 152

# slowapi limit strings such as "60/minute" or "5 per second"
RATE_LIMIT_PATTERN = re.compile(r"^\s*\d+\s*(/|per)\s*(second|minute|hour|day)s?\s*$")

class StartupValidationError(Exception):
    """Raised when startup validation fails"""
    pass

def validate_default_alphabet() -> Tuple[bool, List[str]]:
    """
    Validate the built-in emoji alphabet
    
    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    
    if len(DEFAULT_ALPHABET) != EXPECTED_DEFAULT_ALPHABET_SIZE:
        issues.append(
            f"DEFAULT_ALPHABET has {len(DEFAULT_ALPHABET)} entries, expected {EXPECTED_DEFAULT_ALPHABET_SIZE}"
        )
    
    multi_unit = [entry for entry in DEFAULT_ALPHABET if len(entry) != 1]
    if multi_unit:
        issues.append(f"DEFAULT_ALPHABET contains multi-codepoint entries: {multi_unit}")
    
    if DELIMITER in DEFAULT_ALPHABET:
        issues.append(f"DEFAULT_ALPHABET contains the delimiter {DELIMITER!r}")
    
    if len(set(DEFAULT_ALPHABET)) != len(DEFAULT_ALPHABET):
        issues.append("DEFAULT_ALPHABET contains duplicate entries")
    
    return len(issues) == 0, issues

def validate_limits() -> Tuple[bool, List[str]]:
    """
    Validate batch and alphabet size limits
    
    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    
    if settings.MAX_BATCH_SIZE < 1:
        issues.append("MAX_BATCH_SIZE must be at least 1")
    
    if settings.MAX_CUSTOM_ALPHABET_SIZE < MIN_ALPHABET_SIZE:
        issues.append(f"MAX_CUSTOM_ALPHABET_SIZE must be at least {MIN_ALPHABET_SIZE}")
    
    return len(issues) == 0, issues

def validate_rate_limits() -> Tuple[bool, List[str]]:
    """
    Validate rate limit strings
    
    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    
    limits = {
        "DEFAULT_RATE_LIMIT": settings.DEFAULT_RATE_LIMIT,
        "GENERATE_RATE_LIMIT": settings.GENERATE_RATE_LIMIT,
        "PARSE_RATE_LIMIT": settings.PARSE_RATE_LIMIT,
    }
    for name, value in limits.items():
        if not RATE_LIMIT_PATTERN.match(value):
            issues.append(f"{name} is not a valid rate limit: {value!r}")
    
    return len(issues) == 0, issues

def validate_cors_origins() -> Tuple[bool, List[str]]:
    """
    Validate CORS origins configuration
    
    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues = []
    
    # An empty list only disables cross-origin access
    if not settings.ALLOWED_ORIGINS:
        logger.warning("ALLOWED_ORIGINS is not set; cross-origin requests will be refused")
    elif "*" in settings.ALLOWED_ORIGINS and len(settings.ALLOWED_ORIGINS) > 1:
        issues.append("ALLOWED_ORIGINS mixes '*' with explicit origins")
    
    return len(issues) == 0, issues

def perform_startup_validation(strict: bool = False) -> bool:
    """
    Perform all startup validations
    
    Args:
        strict: If True, a failed validation raises instead of returning False
        
    Returns:
        True if all validations pass, False otherwise
        
    Raises:
        StartupValidationError: If validations fail in strict mode
    """
    logger.info("Starting application validation...")
    
    all_issues = []
    
    validations = [
        ("Default Alphabet", validate_default_alphabet),
        ("Limits", validate_limits),
        ("Rate Limits", validate_rate_limits),
        ("CORS Origins", validate_cors_origins),
    ]
    
    for name, validator in validations:
        is_valid, issues = validator()
        if not is_valid:
            logger.error("%s validation failed: %s", name, "; ".join(issues))
            all_issues.extend([f"{name}: {issue}" for issue in issues])
        else:
            logger.info("%s validation passed", name)
    
    if all_issues:
        error_summary = "\n".join([f"  - {issue}" for issue in all_issues])
        logger.error("Startup validation failed with %d issues:\n%s", len(all_issues), error_summary)
        
        if strict:
            raise StartupValidationError(f"Startup validation failed: {'; '.join(all_issues)}")
        return False
    
    logger.info("All startup validations passed successfully")
    return True

# FastAPI event handler
async def startup_event():
    """FastAPI startup event handler"""
    logging.getLogger("emojid").setLevel(settings.LOG_LEVEL)
    perform_startup_validation(strict=False)

if __name__ == "__main__":
    # Command line validation
    logging.basicConfig(level=logging.INFO)
    try:
        success = perform_startup_validation(strict=True)
    except StartupValidationError as e:
        print(f"❌ Critical validation error: {str(e)}")
        sys.exit(1)
    print("✅ All startup validations passed" if success else "❌ Startup validation failed")
    sys.exit(0 if success else 1)
