"""
Built-in Morphological Data

Default definitions used when no data directory is configured, or to seed
missing definition files:
- Roots covering every root type
- Common derivation schemes (active/passive participles, verbal nouns...)
- Transformation groups for weak roots
"""

from typing import List

# =============================================================================
# ROOTS
# =============================================================================

DEFAULT_ROOTS: List[str] = [
    # Regular
    'كتب', 'درس', 'علم', 'فتح', 'نصر', 'جلس', 'خرج', 'سأل', 'قرأ',
    # Mithal
    'وعد', 'وصل', 'يسر',
    # Ajwaf
    'قول', 'قال', 'بيع', 'نوم',
    # Naqis
    'دعو', 'رمي', 'سعى',
    # Lafif
    'وقي', 'روي',
]

# =============================================================================
# SCHEMES
# =============================================================================

DEFAULT_SCHEMES = """\
# Active and passive participles
فاعل={1}ا{2}{3}
مفعول=م{1}{2}و{3}
# Intensive and place nouns
فعّال={1}{2}ّا{3}
مفعل=م{1}{2}{3}
فعيل={1}{2}ي{3}
# Verbal nouns
افتعال=ا{1}ت{2}ا{3}
استفعال=است{1}{2}ا{3}
تفعيل=ت{1}{2}ي{3}
"""

# =============================================================================
# TRANSFORMATIONS
# =============================================================================

DEFAULT_TRANSFORMATIONS = """\
ajwaf_فاعل:replace=او>ائ;replace=اي>ائ
# Hollow active participle: the weak middle radical becomes hamza
# قاول -> قائل, بايع -> بائع
ajwaf_مفعول:replace=وو>و;replace=يو>ي
# مقوول -> مقول, مبيوع -> مبيع
naqis_فاعل:replace_final=ي
# Final radical surfaces as ya before tanween (داعو -> داعي -> داعٍ)
naqis_مفعول:replace=وو>وّ;replace=وي>يّ;replace=وى>يّ
# مدعوو -> مدعوّ, مرموي -> مرميّ
mithal_افتعال:replace=وت>تّ;replace=يت>تّ
# Weak first radical assimilates to the infix ta (اوتعاد -> اتّعاد)
lafif_مفعول:replace=وي>يّ
# موقوي -> موقيّ
exception_سأل_مفعول:replace=أو>ؤو
# Hamza on waw seat: مسأول -> مسؤول
"""


def default_root_lines() -> List[str]:
    return list(DEFAULT_ROOTS)


def default_scheme_lines() -> List[str]:
    return DEFAULT_SCHEMES.splitlines()


def default_transformation_lines() -> List[str]:
    return DEFAULT_TRANSFORMATIONS.splitlines()
