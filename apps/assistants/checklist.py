"""Document checklist lookup by (education level, destination)."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    english_name: str
    nepali_name: str
    description: str


@dataclass
class Checklist:
    education_level: str
    destination: str
    items: list
    notes: str


BASE_DOCUMENTS = [
    Document("Passport", "राहदानी", "Valid passport with at least six months of validity beyond your intended stay."),
    Document("SEE Certificate & Marksheet", "एसईई प्रमाणपत्र र मार्कसिट",
             "Secondary Education Examination certificate, character certificate and gradesheet."),
    Document("+2 Transcript & Certificate", "+२ ट्रान्सक्रिप्ट र प्रमाणपत्र",
             "Higher secondary transcript, provisional certificate, migration and character certificate."),
    Document("English Proficiency Test Score", "अंग्रेजी भाषा परीक्षाको नतिजा",
             "IELTS, PTE, TOEFL or Duolingo score report meeting the institution's minimum requirement."),
    Document("Statement of Purpose (SOP)", "उद्देश्यको विवरण",
             "A personal essay explaining your study plans, motivations and career goals."),
    Document("Bank Balance Certificate", "बैंक ब्यालेन्स प्रमाणपत्र",
             "Proof of funds covering tuition and living expenses, usually held for a set period."),
    Document("Sponsor's Income Sources", "प्रायोजकको आय स्रोत",
             "Documents proving the annual income of your sponsors (salary, business, rent, agriculture)."),
    Document("Relationship Verification Certificate", "नाता प्रमाणित प्रमाणपत्र",
             "Ward-issued certificate confirming your relationship with your sponsors."),
    Document("Passport-size Photographs", "पासपोर्ट साइजको फोटो",
             "Recent photographs meeting the destination's visa photo specifications."),
]

LEVEL_DOCUMENTS = {
    "Diploma": [
        Document("Diploma Transcript & Certificate", "डिप्लोमा ट्रान्सक्रिप्ट र प्रमाणपत्र",
                 "Transcripts and completion certificate of your diploma program."),
    ],
    "Bachelor's Degree": [
        Document("Bachelor's Transcript & Degree Certificate", "स्नातक ट्रान्सक्रिप्ट र प्रमाणपत्र",
                 "Official transcripts of all years and the degree or provisional certificate."),
        Document("Letters of Recommendation (LOR)", "सिफारिस पत्र",
                 "Two or three letters from professors or employers who know your work."),
        Document("CV / Resume", "बायोडाटा", "Summary of your education, work experience and achievements."),
    ],
    "Master's Degree": [
        Document("Bachelor's & Master's Transcripts", "स्नातक र स्नातकोत्तर ट्रान्सक्रिप्ट",
                 "Official transcripts and degree certificates from every university attended."),
        Document("Letters of Recommendation (LOR)", "सिफारिस पत्र",
                 "Academic or professional references supporting your application."),
        Document("CV / Resume", "बायोडाटा", "Summary of your education, research and work experience."),
        Document("Work Experience Letters", "कार्य अनुभव पत्र",
                 "Employer letters confirming role, duration and responsibilities, where applicable."),
    ],
}

COUNTRY_DOCUMENTS = {
    "USA": [
        Document("Form I-20", "फारम आई-२०", "Certificate of eligibility issued by your SEVP-certified school."),
        Document("SEVIS Fee Receipt", "सेभिस शुल्क रसिद", "Proof of I-901 SEVIS fee payment."),
        Document("DS-160 Confirmation", "डीएस-१६० पुष्टि पत्र", "Confirmation page of the online visa application."),
    ],
    "Australia": [
        Document("Confirmation of Enrolment (CoE)", "भर्ना पुष्टि पत्र",
                 "Issued by your Australian institution after accepting the offer and paying the deposit."),
        Document("Genuine Student Statement", "वास्तविक विद्यार्थी विवरण",
                 "Statement addressing the genuine student requirement."),
        Document("Overseas Student Health Cover (OSHC)", "विद्यार्थी स्वास्थ्य बीमा",
                 "Health insurance for the full duration of your visa."),
    ],
    "Canada": [
        Document("Letter of Acceptance (DLI)", "स्वीकृति पत्र",
                 "Acceptance letter from a Designated Learning Institution."),
        Document("Provincial Attestation Letter (PAL)", "प्रादेशिक प्रमाण पत्र",
                 "Attestation from the province or territory where you will study."),
        Document("Medical Examination Report", "स्वास्थ्य परीक्षण प्रतिवेदन",
                 "Upfront medical exam by an IRCC panel physician, if required."),
    ],
    "UK": [
        Document("Confirmation of Acceptance for Studies (CAS)", "अध्ययन स्वीकृति पुष्टि (CAS)",
                 "Reference number issued by your licensed UK sponsor."),
        Document("TB Test Certificate", "क्षयरोग परीक्षण प्रमाणपत्र",
                 "Tuberculosis test result from an approved clinic."),
    ],
    "New Zealand": [
        Document("Offer of Place", "भर्ना प्रस्ताव पत्र", "Offer letter from an approved New Zealand education provider."),
        Document("Medical & X-ray Certificates", "स्वास्थ्य र एक्स-रे प्रमाणपत्र",
                 "Health certificates from an Immigration New Zealand panel physician."),
        Document("Police Clearance Certificate", "प्रहरी प्रतिवेदन", "Character certificate issued by Nepal Police."),
    ],
}

COUNTRY_NOTES = {
    "USA": "The F-1 visa interview is decisive. Most universities expect IELTS 6.0-7.0 or TOEFL iBT 79-100. "
           "Bring original financial documents to the interview.",
    "Australia": "Funds must usually be held for at least three months. Universities commonly ask for "
                 "IELTS 6.0-6.5 or PTE 50-58.",
    "Canada": "Show a GIC or equivalent proof of funds along with tuition payment receipts. Colleges commonly "
              "ask for IELTS 6.0 with no band below 5.5.",
    "UK": "Funds must be held for 28 consecutive days before applying. Use IELTS UKVI where the course requires it.",
    "New Zealand": "Show funds for tuition plus living costs for the first year. Most providers ask for IELTS 6.0.",
}

GENERAL_NOTE = ("Get certified English translations of any Nepali documents, keep the names and dates of birth "
                "consistent across all documents, and prepare both originals and notarised copies.")


def get_checklist(education_level, destination):
    items = list(BASE_DOCUMENTS)
    seen = {doc.english_name for doc in items}
    for doc in LEVEL_DOCUMENTS.get(education_level, []) + COUNTRY_DOCUMENTS.get(destination, []):
        if doc.english_name not in seen:
            items.append(doc)
            seen.add(doc.english_name)

    notes = " ".join(filter(None, [COUNTRY_NOTES.get(destination), GENERAL_NOTE]))
    return Checklist(education_level=education_level, destination=destination, items=items, notes=notes)
