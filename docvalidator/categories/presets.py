"""Built-in document categories."""

from docvalidator.categories.models import DocumentCategory

_DATE = r"\d{2}[/-]\d{2}[/-]\d{2,4}"
_DOLLAR_AMOUNT = r"\$[\d,]+\.\d{2}"
_EIN = r"\d{2}-\d{7}"
_SSN = r"\d{3}-\d{2}-\d{4}"

# Individual documents

DRIVERS_LICENSE = DocumentCategory(
    name="Driver's License",
    id="drivers_license",
    expects_face=True,
    expects_document_edges=True,
    keyword_groups=(
        ("driver", "license"),
        ("driver", "licence"),
        ("operator", "license"),
        ("DL",),
        ("driving", "license"),
        ("identification", "card"),
    ),
    minimum_text_density=0.08,
    expected_patterns=(
        _DATE,
        r"[A-Z]\d{3,}",  # license number
    ),
)

PASSPORT = DocumentCategory(
    name="Passport",
    id="passport",
    expects_face=True,
    expects_document_edges=True,
    keyword_groups=(
        ("passport",),
        ("pasaporte",),
        ("travel", "document"),
    ),
    minimum_text_density=0.05,
    expected_patterns=(
        r"[A-Z]{1,2}\d{6,9}",  # passport number
        r"[PM][<]",  # MRZ line start
    ),
)

UTILITY_BILL = DocumentCategory(
    name="Utility Bill",
    id="utility_bill",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("electric", "bill"),
        ("water", "bill"),
        ("gas", "bill"),
        ("utility", "bill"),
        ("account", "number"),
        ("amount", "due"),
        ("billing", "statement"),
        ("energy", "statement"),
        ("service", "address"),
    ),
    minimum_text_density=0.15,
    expected_patterns=(_DOLLAR_AMOUNT, _DATE),
)

BANK_STATEMENT = DocumentCategory(
    name="Bank Statement",
    id="bank_statement",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("bank", "statement"),
        ("account", "summary"),
        ("checking", "account"),
        ("savings", "account"),
        ("beginning", "balance"),
        ("ending", "balance"),
        ("deposits", "withdrawals"),
    ),
    minimum_text_density=0.2,
    expected_patterns=(_DOLLAR_AMOUNT, _DATE),
)

SOCIAL_SECURITY_CARD = DocumentCategory(
    name="Social Security Card",
    id="social_security_card",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("social", "security"),
        ("social security administration",),
    ),
    minimum_text_density=0.05,
    expected_patterns=(_SSN,),
)

# Business documents

ARTICLES_OF_INCORPORATION = DocumentCategory(
    name="Articles of Incorporation",
    id="articles_of_incorporation",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("articles", "incorporation"),
        ("certificate", "incorporation"),
        ("certificate", "formation"),
        ("articles", "organization"),
        ("corporate", "charter"),
        ("secretary", "state"),
    ),
    minimum_text_density=0.2,
    expected_patterns=(
        r"(?i)incorporat",
        r"(?i)registered\s+agent",
    ),
)

BUSINESS_LICENSE = DocumentCategory(
    name="Business License",
    id="business_license",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("business", "license"),
        ("business", "licence"),
        ("occupational", "license"),
        ("business", "permit"),
        ("license", "number"),
    ),
    minimum_text_density=0.1,
    expected_patterns=(_DATE,),
)

EIN_LETTER = DocumentCategory(
    name="EIN Confirmation Letter",
    id="ein_letter",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("employer", "identification", "number"),
        ("EIN",),
        ("internal", "revenue", "service"),
        ("IRS",),
        ("147C",),
        ("SS-4",),
    ),
    minimum_text_density=0.15,
    expected_patterns=(_EIN,),
)

TAX_RETURN = DocumentCategory(
    name="Tax Return",
    id="tax_return",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("form", "1040"),
        ("form", "1120"),
        ("form", "1065"),
        ("tax", "return"),
        ("internal", "revenue"),
        ("taxable", "income"),
        ("adjusted", "gross"),
    ),
    minimum_text_density=0.2,
    expected_patterns=(
        _DOLLAR_AMOUNT,
        r"(?i)form\s+\d{3,4}",
    ),
)

PROOF_OF_INSURANCE = DocumentCategory(
    name="Proof of Insurance",
    id="proof_of_insurance",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("insurance", "certificate"),
        ("certificate", "liability"),
        ("proof", "insurance"),
        ("policy", "number"),
        ("general", "liability"),
        ("workers", "compensation"),
        ("ACORD",),
    ),
    minimum_text_density=0.15,
    expected_patterns=(
        _DATE,
        r"(?i)policy",
    ),
)

W9 = DocumentCategory(
    name="W-9 Form",
    id="w9",
    expects_face=False,
    expects_document_edges=True,
    keyword_groups=(
        ("W-9",),
        ("taxpayer", "identification"),
        ("request", "taxpayer"),
        ("certification", "tin"),
    ),
    minimum_text_density=0.15,
    expected_patterns=(_EIN, _SSN),
)

ALL_INDIVIDUAL: tuple[DocumentCategory, ...] = (
    DRIVERS_LICENSE,
    PASSPORT,
    UTILITY_BILL,
    BANK_STATEMENT,
    SOCIAL_SECURITY_CARD,
)

ALL_BUSINESS: tuple[DocumentCategory, ...] = (
    ARTICLES_OF_INCORPORATION,
    BUSINESS_LICENSE,
    EIN_LETTER,
    TAX_RETURN,
    PROOF_OF_INSURANCE,
    W9,
)
