"""
Static site content: testimonials, services, team, country guides, FAQ,
interview practice, English test comparison and the pre-departure toolkit.

Pages read these structures directly; nothing here touches the database.
"""

from config.constants import SOCIAL_FACEBOOK, SOCIAL_INSTAGRAM, SOCIAL_TIKTOK, SOCIAL_YOUTUBE

TESTIMONIALS = [
    {
        'name': 'Bhawana Paneru',
        'destination': 'University of Central Arkansas, USA',
        'text': "Pixar Edu provided excellent support throughout my application process to the USA. "
                "Highly recommended for their professionalism!",
    },
    {
        'name': 'Pratik B K',
        'destination': 'Georgian College, Canada',
        'text': "My journey to Canada was made much smoother thanks to the Pixar Edu team. "
                "Their guidance on visa and college selection was top-notch.",
    },
    {
        'name': 'Prashana Thapa Magar',
        'destination': 'Cardiff Metropolitan University, UK',
        'text': "The counselors at Pixar Edu were incredibly helpful in securing my admission and visa "
                "for the UK. A truly professional service!",
    },
    {
        'name': 'Arju Pokhrel',
        'destination': 'University of New Castle, Australia',
        'text': "I'm grateful to Pixar Edu for their expert advice on studying in Australia. "
                "They made a complex process seem easy.",
    },
    {
        'name': 'Srijana Rana',
        'destination': 'Eastern Institute of Technology, New Zealand',
        'text': "Choosing Pixar Edu was the best decision for my New Zealand study plans. "
                "Their support was exceptional from start to finish.",
    },
    {
        'name': 'Bivusha Gautam',
        'destination': 'Arkansas State University, USA',
        'text': "Thanks to Pixar Edu, I am now pursuing my dream course in the USA. "
                "Their visa guidance was particularly helpful.",
    },
]

VISA_SUCCESSES = {
    'USA': [
        {'name': 'Bhawana Paneru', 'destination': 'University of Central Arkansas, USA',
         'text': "PixarEdu's guidance was invaluable for my US visa. Highly recommended!"},
        {'name': 'Bivusha Gautam', 'destination': 'Arkansas State University, USA',
         'text': "Thanks to Pixar, I'm studying in the USA. Their visa support is excellent."},
        {'name': 'Rajan Yadav', 'destination': 'University of Central Missouri, USA',
         'text': "The team at PixarEdu made my US study dream a reality. Very professional."},
        {'name': 'Indra Bahadur Air', 'destination': 'Murray State University, USA',
         'text': "A smooth and successful visa process for the USA. Thank you, PixarEdu!"},
        {'name': 'Roshi Pandey', 'destination': 'NorthWest Missouri State University, USA',
         'text': "My US student visa was approved smoothly. The mock interviews were very helpful."},
        {'name': 'Sulab Bhandari', 'destination': 'Louisiana Tech University, USA',
         'text': "The entire process was seamless. Thank you PixarEdu for the US visa success."},
        {'name': 'Meera Koirala', 'destination': 'St.Cloud State University, USA',
         'text': "I am thrilled to be studying in the USA, all thanks to PixarEdu's support."},
        {'name': 'Karuna Chettri', 'destination': 'University OF South Dakota, USA',
         'text': "The team is knowledgeable and guided me perfectly for my US student visa."},
        {'name': 'Manav Adhikari', 'destination': 'Wichita State University, USA',
         'text': "My US visa success is a testament to their hard work and expertise."},
        {'name': 'Jhakku Prasad Chalaune', 'destination': 'University of Central Arkansas, USA',
         'text': "Their visa interview preparation is the best. It made all the difference."},
    ],
    'Australia': [
        {'name': 'Arju Pokhrel', 'destination': 'University of New Castle, Australia',
         'text': "Grateful for the expert advice on studying in Australia. A smooth process!"},
        {'name': 'Sushruti Sharma', 'destination': 'University of Wollongong, Australia',
         'text': "PixarEdu's guidance on the GTE was crucial for my Australian visa success."},
        {'name': 'Rohit Sha Kanu', 'destination': 'Flinders University, Australia',
         'text': "A professional service that made my dream of studying in Australia come true."},
        {'name': 'Hari Sharan Puri', 'destination': 'La Trobe University, Australia',
         'text': "Thank you PixarEdu for helping me secure my visa for Australia."},
        {'name': 'Aanchal Thapa', 'destination': 'Victoria University, Australia',
         'text': "Their assistance with documentation was top-notch. Highly professional."},
    ],
    'Canada': [
        {'name': 'Pratik B K', 'destination': 'Georgian College, Canada',
         'text': "My journey to Canada was made much smoother with PixarEdu. "
                 "Their guidance on the visa process was excellent."},
    ],
    'UK': [
        {'name': 'Prashana Thapa Magar', 'destination': 'Cardiff Metropolitan University, UK',
         'text': "The counselors at PixarEdu were incredibly helpful in securing my admission and visa for the UK."},
    ],
    'New Zealand': [
        {'name': 'Srijana Rana', 'destination': 'Eastern Institute of Technology, New Zealand',
         'text': "Choosing PixarEdu was the best decision for my New Zealand study plans. Exceptional support!"},
        {'name': 'Shulav Dangi', 'destination': 'Otago Polytechnic, New Zealand',
         'text': "The process for New Zealand was straightforward with their help."},
        {'name': 'Puja Chaudhary', 'destination': 'Auckland Institute Of Studies, New Zealand',
         'text': "Very happy with the outcome. Now studying in beautiful New Zealand."},
    ],
}

SERVICES = [
    {
        'id': 'english-prep',
        'title': 'Expert English Test Preparation',
        'description': 'Ace IELTS, TOEFL, PTE & Duolingo with our tailored coaching.',
        'long_description': (
            "Our comprehensive English test preparation programs are designed to equip you with the "
            "skills and strategies needed to achieve your target scores. We offer specialized coaching "
            "for IELTS, TOEFL iBT, PTE Academic, and the Duolingo English Test."
        ),
        'key_features': [
            "Tailored coaching for IELTS, TOEFL, PTE, Duolingo",
            "Experienced instructors & personalized feedback",
            "Comprehensive mock tests and practice materials",
            "Small class sizes for focused attention",
        ],
    },
    {
        'id': 'personalized-guidance',
        'title': 'Personalized Guidance',
        'description': 'Tailored advice to match your academic goals and preferences.',
        'long_description': (
            "Every student is unique, with different aspirations and academic backgrounds. We offer "
            "personalized guidance sessions to understand your specific needs, help you choose the right "
            "courses and universities, and develop a strategic application plan."
        ),
        'key_features': [
            "One-on-one counseling sessions",
            "Course and university shortlisting based on profile",
            "Career pathway mapping and advice",
            "Scholarship & funding opportunity guidance",
        ],
    },
    {
        'id': 'documentation-assistance',
        'title': 'Documentation Assistance',
        'description': 'Comprehensive support for all your application paperwork.',
        'long_description': (
            "We provide meticulous assistance with preparing, organizing, and reviewing all necessary "
            "documents, including transcripts, recommendation letters, statements of purpose, and "
            "financial proofs, so that your application is complete and accurate."
        ),
        'key_features': [
            "Application form completion strategy",
            "Statement of Purpose (SOP/Essay) review & feedback",
            "Financial document checklist & guidance",
            "Letter of Recommendation (LOR) advice",
        ],
    },
    {
        'id': 'visa-support',
        'title': 'Visa & Pre-Departure Support',
        'description': 'Expert help with visa applications and pre-departure preparations.',
        'long_description': (
            "We offer expert assistance with visa applications, including mock interviews and document "
            "checklists. We also run pre-departure briefings covering accommodation, cultural adaptation "
            "and essential travel tips."
        ),
        'key_features': [
            "Visa application form guidance",
            "Unlimited mock visa interviews for U.S. aspirants",
            "Financial documentation review",
            "Pre-departure briefing sessions",
        ],
    },
]

TEAM = [
    {'name': 'Pradeep Khadka', 'role': 'Chief Executive Officer',
     'bio': "With over 15 years of experience in international education, Pradeep is passionate about "
            "helping students achieve their academic dreams."},
    {'name': 'Pawan Acharya', 'role': 'Managing Director',
     'bio': "Leads counseling operations and partner relationships."},
    {'name': 'Mujal Amatya', 'role': 'USA Counselor',
     'bio': "Guides U.S. applicants from university selection through the F-1 visa interview."},
    {'name': 'Shyam Babu Ojha', 'role': 'NZ Counselor',
     'bio': "Specialises in New Zealand admissions and student visas."},
    {'name': 'Sabina Thapa', 'role': 'Australia Counselor',
     'bio': "Helps students prepare GTE statements and Australian visa files."},
    {'name': 'Sonima Rijal', 'role': 'Application Officer',
     'bio': "Prepares and tracks university applications."},
    {'name': 'Sujata Nepal', 'role': 'Application Officer',
     'bio': "Prepares and tracks university applications."},
    {'name': 'Anisha Thapa', 'role': 'Academic Head - IELTS & PTE',
     'bio': "Runs the IELTS and PTE preparation classes."},
    {'name': 'Saubhana Bhandari', 'role': 'Frontdesk Officer',
     'bio': "First point of contact for visiting students and parents."},
    {'name': 'Mamata Chapagain', 'role': 'Documents Officer',
     'bio': "Reviews and organises student documentation."},
    {'name': 'Sunita Khadka', 'role': 'Office Caretaker',
     'bio': "Ensures a clean, organized, and welcoming office environment for students and staff."},
    {'name': 'Shikhar KC', 'role': 'IT Head',
     'bio': "Manages our IT infrastructure and digital platforms, ensuring smooth technological operations."},
    {'name': 'Ram Babu Ojha', 'role': 'Video Editor',
     'bio': "Creates engaging video content for our promotional and informational materials."},
]

COUNTRIES = [
    {
        'slug': 'australia',
        'name': 'Australia',
        'flag': '🇦🇺',
        'description': "Experience a high-quality education system in a vibrant, multicultural environment. "
                       "Australian universities are known for their research and innovation.",
        'living_cost': 'AUD $21,000 - $29,000 per year',
        'work_hours': 'Up to 48 hours per fortnight during academic sessions, unlimited during scheduled breaks.',
        'visa_summary': "Student visa (subclass 500). Requires Confirmation of Enrolment (CoE), Genuine "
                        "Temporary Entrant (GTE) statement, financial proof and Overseas Student Health Cover (OSHC).",
        'post_study_work': "Temporary Graduate visa (subclass 485) allows eligible students to stay and work "
                           "for 2-4 years, depending on qualification.",
        'approval_trends': "Generally positive for genuine students. Success rates can vary.",
        'salary_after_study': "AUD $55,000 - $75,000 per year for recent graduates, varying by field.",
        'pr_pathways': "General Skilled Migration (subclass 189, 190, 491) and employer sponsorship "
                       "after work experience. Criteria are points-based.",
        'facts': [
            ('Major Cities', 'Sydney, Melbourne, Brisbane, Perth, Adelaide'),
            ('Language', 'English'),
            ('Known For', 'STEM, Business, Health Sciences, Environmental Studies'),
        ],
        'top_universities': [
            {'name': 'Australian National University', 'city': 'Canberra', 'website': 'https://www.anu.edu.au'},
            {'name': 'University of Melbourne', 'city': 'Melbourne', 'website': 'https://www.unimelb.edu.au'},
            {'name': 'University of Sydney', 'city': 'Sydney', 'website': 'https://www.sydney.edu.au'},
        ],
    },
    {
        'slug': 'canada',
        'name': 'Canada',
        'flag': '🇨🇦',
        'description': "Canada offers a high standard of living, diverse culture, and excellent educational "
                       "institutions. It is a popular choice for international students.",
        'living_cost': 'CAD $15,000 - $25,000 per year (excluding tuition)',
        'work_hours': 'Up to 20 hours/week during regular academic sessions, full-time during scheduled breaks.',
        'visa_summary': "A Study Permit is required. You need an acceptance letter from a Designated Learning "
                        "Institution (DLI), proof of financial support, and possibly biometrics and a medical exam.",
        'post_study_work': "Post-Graduation Work Permit (PGWP) allows graduates to gain Canadian work "
                           "experience for up to 3 years, depending on program length.",
        'approval_trends': "High approval rates for complete applications from genuine students.",
        'salary_after_study': "CAD $45,000 - $65,000 per year for entry-level positions.",
        'pr_pathways': "Express Entry (Canadian Experience Class, Federal Skilled Worker Program) and "
                       "Provincial Nominee Programs (PNPs).",
        'facts': [
            ('Major Cities', 'Toronto, Montreal, Vancouver, Calgary, Ottawa'),
            ('Languages', 'English, French'),
            ('Known For', 'Technology, Engineering, Business, Health Sciences, AI'),
        ],
        'top_universities': [
            {'name': 'University of Toronto', 'city': 'Toronto', 'website': 'https://www.utoronto.ca'},
            {'name': 'McGill University', 'city': 'Montreal', 'website': 'https://www.mcgill.ca'},
            {'name': 'University of British Columbia', 'city': 'Vancouver', 'website': 'https://www.ubc.ca'},
        ],
    },
    {
        'slug': 'usa',
        'name': 'USA',
        'flag': '🇺🇸',
        'description': "Home to many of the world's top universities, the USA offers unparalleled educational "
                       "opportunities across all fields of study.",
        'living_cost': 'USD $12,000 - $18,000 per year (highly variable by city and lifestyle)',
        'work_hours': 'Up to 20 hours/week on-campus during term; CPT or OPT for off-campus work.',
        'visa_summary': "F-1 visa for academic studies. Requires an I-20 form from an SEVP-certified school, "
                        "SEVIS fee payment, proof of funds, and a visa interview.",
        'post_study_work': "Optional Practical Training (OPT) allows up to 12 months of work experience, "
                           "extendable by 24 months for STEM fields.",
        'approval_trends': "Approval depends heavily on the visa interview and demonstrating non-immigrant intent.",
        'salary_after_study': "USD $60,000 - $80,000+ per year for bachelor's degree holders.",
        'pr_pathways': "Green Card through employer sponsorship (EB-2, EB-3) or family-based petitions.",
        'facts': [
            ('Key States', 'California, New York, Massachusetts, Texas, Illinois'),
            ('Language', 'English'),
            ('Known For', 'Technology, Business, Research, Arts, Engineering'),
        ],
        'top_universities': [
            {'name': 'Massachusetts Institute of Technology (MIT)', 'city': 'Cambridge, MA',
             'website': 'https://web.mit.edu'},
            {'name': 'Stanford University', 'city': 'Stanford, CA', 'website': 'https://www.stanford.edu'},
            {'name': 'Harvard University', 'city': 'Cambridge, MA', 'website': 'https://www.harvard.edu'},
        ],
    },
    {
        'slug': 'uk',
        'name': 'UK',
        'flag': '🇬🇧',
        'description': "The United Kingdom boasts a rich academic heritage with world-renowned universities "
                       "and a vibrant student life in historic cities.",
        'living_cost': 'GBP £12,000 - £15,000 per year (London significantly higher)',
        'work_hours': 'Up to 20 hours/week during term-time for degree students.',
        'visa_summary': "Student visa. Requires a Confirmation of Acceptance for Studies (CAS) from a licensed "
                        "sponsor, proof of funds and English proficiency (e.g. IELTS UKVI).",
        'post_study_work': "The Graduate Route allows eligible graduates to stay and work for 2 years "
                           "(3 years for PhD graduates).",
        'approval_trends': "Generally good for applicants meeting all requirements.",
        'salary_after_study': "GBP £25,000 - £35,000 per year for new graduates.",
        'pr_pathways': "Indefinite Leave to Remain after several years on a long-term work visa such as "
                       "the Skilled Worker visa.",
        'facts': [
            ('Major Cities', 'London, Manchester, Birmingham, Edinburgh, Glasgow'),
            ('Language', 'English'),
            ('Known For', 'Finance, Law, Arts & Humanities, Science, Engineering'),
        ],
        'top_universities': [
            {'name': 'University of Oxford', 'city': 'Oxford', 'website': 'https://www.ox.ac.uk'},
            {'name': 'University of Cambridge', 'city': 'Cambridge', 'website': 'https://www.cam.ac.uk'},
            {'name': 'Imperial College London', 'city': 'London', 'website': 'https://www.imperial.ac.uk'},
        ],
    },
    {
        'slug': 'new-zealand',
        'name': 'New Zealand',
        'flag': '🇳🇿',
        'description': "Study in a safe, welcoming country with a world-class education system and stunning "
                       "natural landscapes.",
        'living_cost': 'NZD $20,000 - $25,000 per year',
        'work_hours': 'Up to 20 hours/week during studies if your course meets requirements, '
                      'full-time during scheduled holidays.',
        'visa_summary': "Fee Paying Student Visa. Requires an Offer of Place from an approved education "
                        "provider, proof of funds, and health and character checks.",
        'post_study_work': "Post-Study Work Visa available for 1-3 years for eligible graduates.",
        'approval_trends': "Good approval rates for well-prepared applications.",
        'salary_after_study': "NZD $50,000 - $65,000 per year for graduates.",
        'pr_pathways': "Points-based Skilled Migrant Category Resident Visa after skilled work experience.",
        'facts': [
            ('Main Cities', 'Auckland, Wellington, Christchurch, Dunedin, Hamilton'),
            ('Language', 'English, Māori'),
            ('Known For', 'Agriculture, Environmental Science, Film, Adventure Tourism'),
        ],
        'top_universities': [
            {'name': 'University of Auckland', 'city': 'Auckland', 'website': 'https://www.auckland.ac.nz'},
            {'name': 'University of Otago', 'city': 'Dunedin', 'website': 'https://www.otago.ac.nz'},
            {'name': 'Victoria University of Wellington', 'city': 'Wellington', 'website': 'https://www.wgtn.ac.nz'},
        ],
    },
]

COUNTRIES_BY_SLUG = {country['slug']: country for country in COUNTRIES}

# Destination names as stored on Student records -> country slug.
DESTINATION_SLUGS = {country['name']: country['slug'] for country in COUNTRIES}

UPCOMING_INTAKES = [
    {'slug': 'usa', 'country': 'USA', 'date': '2026-01-15', 'note': 'Spring 2026 Intake'},
    {'slug': 'australia', 'country': 'Australia', 'date': '2026-02-20', 'note': 'Major Intake: Feb 2026'},
    {'slug': 'canada', 'country': 'Canada', 'date': '2026-01-10', 'note': 'Winter 2026 Intake'},
    {'slug': 'uk', 'country': 'UK', 'date': '2025-09-20', 'note': 'Fall 2025 Intake'},
    {'slug': 'new-zealand', 'country': 'New Zealand', 'date': '2026-02-25', 'note': 'Semester 1, 2026 Intake'},
]

UNIVERSITY_LIST = {
    'USA': [
        'Arkansas State University', 'Harrisburg University', 'Louisiana Tech University',
        'Midwestern State University', 'Montana State University', 'Murray State University',
        'NorthWest Missouri State University', 'Southeast Missouri State University',
        'St.Cloud State University', 'University of Central Arkansas', 'University of Central Missouri',
        'University Of South Dakota', 'Washington University Of Science And Technology',
        'Webster University', 'Westcliff University', 'Wichita State University', 'Wright State University',
    ],
    'Australia': [
        'University of New Castle', 'Victoria University', 'University of Melbourne', 'Monash University',
        'University of Sydney', 'Flinders University', 'University of Wollongong', 'La Trobe University',
        'Deakin University', 'RMIT University',
    ],
    'Canada': [
        'Georgian College', 'University of Toronto', 'McGill University', 'University of British Columbia',
        'University of Alberta', 'University of Waterloo',
    ],
    'UK': [
        'Cardiff Metropolitan University', 'University of Oxford', 'University of Cambridge',
    ],
    'New Zealand': [
        'Eastern Institute of Technology', 'Otago Polytechnic', 'University of Auckland', 'University of Otago',
        'University of Waikato', 'Massey University', 'Victoria University of Wellington',
    ],
}

FAQ = [
    {
        'category': 'General & Consultation',
        'questions': [
            ("What is Pixar Educational Consultancy?",
             "Pixar Educational Consultancy is a student-focused organization dedicated to helping Nepali students "
             "study abroad, primarily in the USA, Australia, UK, Canada, and New Zealand."),
            ("Which countries do you specialize in for study abroad?",
             "We specialize in guiding students for studies in the USA, UK, Australia, Canada, and New Zealand."),
            ("How do I start the consultation process?",
             "Contact us via phone or email, visit our office in New Baneshwor, Kathmandu, or fill out the contact "
             "form on this website. We begin with an initial counseling session to understand your needs."),
            ("Is the initial consultation free?",
             "Yes, our initial consultation session is generally free of charge."),
        ],
    },
    {
        'category': 'Application & University Selection',
        'questions': [
            ("How do you help with choosing universities and courses?",
             "Our counselors assess your academic background, interests, career goals and budget, then help you "
             "shortlist suitable universities and courses."),
            ("Can you help with writing SOPs and LORs?",
             "Yes, we provide guidance and feedback on your Statement of Purpose and help you understand what makes "
             "a strong Letter of Recommendation. The core content must be yours."),
            ("How long does the application process take?",
             "It can range from a few months to over a year. We recommend starting at least 6-12 months before "
             "your intended intake."),
        ],
    },
    {
        'category': 'Visa Process',
        'questions': [
            ("What kind of visa support do you provide?",
             "We help with visa forms, financial documentation and appointment scheduling, and we run mock visa "
             "interviews."),
            ("Do you offer visa interview preparation for the USA?",
             "Yes. We offer unlimited visa interview preparation classes for U.S. F-1 visa aspirants."),
            ("When should I apply for my student visa?",
             "As soon as you receive your acceptance letter (I-20, CAS or CoE) and have all your documents in order."),
        ],
    },
    {
        'category': 'English Test Preparation',
        'questions': [
            ("Which English proficiency test should I take?",
             "It depends on the requirements of your target universities and country. Try the English Test "
             "Advisor on our Smart Tools page for an initial recommendation."),
            ("Do you offer preparation classes for these English tests?",
             "Yes, we offer classes for IELTS, TOEFL iBT, PTE Academic and the Duolingo English Test."),
        ],
    },
    {
        'category': 'Services & Fees',
        'questions': [
            ("Are there any hidden costs involved?",
             "No. Our service fees are communicated upfront. University application fees, visa fees, test fees "
             "and SEVIS fees are paid directly to the respective authorities."),
            ("What payment methods do you accept?",
             "Bank transfer, cash, and sometimes digital wallets."),
        ],
    },
]

INTERVIEW_QA = [
    {
        'country': 'USA',
        'slug': 'usa',
        'intro': "US F-1 visa interviews focus on your intent to return home, your financial capacity and your "
                 "study plans.",
        'categories': [
            {
                'title': 'About Your Study Plans',
                'questions': [
                    {
                        'question': "Why do you want to study in the USA?",
                        'answer': "I want to study in the USA because of its world-renowned education system in "
                                  "[Your Field of Study], which will best equip me for my career goals back in Nepal.",
                        'tips': ["Be specific about the US education system or your chosen field.",
                                 "Connect it to your career goals."],
                    },
                    {
                        'question': "Why did you choose this specific university?",
                        'answer': "I chose [Specific University] after extensive research. Its [Program Name] "
                                  "program aligns with my interest in [Specific Area].",
                        'tips': ["Name specific programs, professors, or facilities."],
                    },
                ],
            },
            {
                'title': 'Financial Capacity',
                'questions': [
                    {
                        'question': "How will you finance your education? Who is sponsoring you?",
                        'answer': "My education will be sponsored by my parents. They have saved approximately "
                                  "[Amount] USD for my education, and I have all the supporting documents.",
                        'tips': ["Be clear and specific about funding sources.",
                                 "Have all financial documents organized."],
                    },
                ],
            },
            {
                'title': 'Post-Graduation Plans & Ties to Home Country',
                'questions': [
                    {
                        'question': "What are your plans after graduation?",
                        'answer': "After completing my degree, I plan to return to Nepal and work as a "
                                  "[Your Future Job Title] in the [Specific Industry].",
                        'tips': ["Strongly emphasize your intent to return to your home country."],
                    },
                ],
            },
        ],
        'tips': ["Dress formally and professionally.", "Arrive on time for your interview.",
                 "Maintain good eye contact with the visa officer."],
    },
    {
        'country': 'Australia',
        'slug': 'australia',
        'intro': "Australian interviews and GTE assessments check that you are a genuine temporary entrant.",
        'categories': [
            {
                'title': 'Genuine Temporary Entrant (GTE) & Study Plans',
                'questions': [
                    {
                        'question': "Why have you chosen Australia for your studies?",
                        'answer': "Australia offers globally recognised qualifications in [Your Field] and a safe, "
                                  "multicultural environment.",
                        'tips': ["Compare with other options you considered."],
                    },
                    {
                        'question': "How will this course help your career in Nepal?",
                        'answer': "The course will give me skills in [Key Skills] that are in demand in Nepal's "
                                  "[Industry].",
                        'tips': ["Mention concrete employers or roles in Nepal."],
                    },
                ],
            },
        ],
        'tips': ["Know your course structure and fees.", "Be consistent with your GTE statement."],
    },
    {
        'country': 'UK',
        'slug': 'uk',
        'intro': "UK credibility interviews check your course choice, finances and intentions.",
        'categories': [
            {
                'title': 'Reasons for Choosing UK & Course',
                'questions': [
                    {
                        'question': "Why this particular university and course?",
                        'answer': "[University]'s [Course] covers [Modules] and has strong links with "
                                  "[Industry].",
                        'tips': ["Refer to specific modules."],
                    },
                ],
            },
        ],
        'tips': ["Know the details of your CAS."],
    },
    {
        'country': 'Canada',
        'slug': 'canada',
        'intro': "Canadian study permit officers focus on your study plan and intent to return.",
        'categories': [
            {
                'title': 'Study Plan & Choice of Canada',
                'questions': [
                    {
                        'question': "Why do you wish to study in Canada?",
                        'answer': "Canada's practical, career-focused programs in [Field] match my goals.",
                        'tips': ["Link the program to your previous studies."],
                    },
                ],
            },
        ],
        'tips': ["Keep your study plan consistent with your application."],
    },
    {
        'country': 'New Zealand',
        'slug': 'new-zealand',
        'intro': "New Zealand interviews check your program choice, funds and ties to home.",
        'categories': [
            {
                'title': 'Reasons for Choosing NZ & Program',
                'questions': [
                    {
                        'question': "Why have you chosen New Zealand for your higher education?",
                        'answer': "New Zealand offers high-quality, research-led education in [Field] in a safe "
                                  "environment.",
                        'tips': ["Mention specific programme strengths."],
                    },
                ],
            },
        ],
        'tips': ["Show a clear plan to return home."],
    },
]

ENGLISH_TESTS_COMPARISON = [
    {
        'name': 'IELTS Academic',
        'cost': '~$245-275 USD',
        'duration': 'Approx. 2h 45m',
        'acceptance': 'Very High (Academia, Immigration globally)',
        'format': 'Paper or Computer; Face-to-face speaking option',
        'result_time': '3-5 days (computer), 13 days (paper)',
        'scoring': 'Band 0-9',
        'key_features': ['Widely accepted globally', 'Speaking test with a human examiner'],
        'website': 'https://www.ielts.org/',
    },
    {
        'name': 'TOEFL iBT',
        'cost': '~$255 USD',
        'duration': 'Under 2 hours',
        'acceptance': 'Very High (Especially US Academia)',
        'format': 'Computer-based at test center',
        'result_time': '4-8 days',
        'scoring': '0-120 (30 per section)',
        'key_features': ['Strong academic focus', 'Integrated tasks simulating university environment'],
        'website': 'https://www.toefl.org/',
    },
    {
        'name': 'PTE Academic',
        'cost': '~$220-250 USD',
        'duration': 'Approx. 2 hours',
        'acceptance': 'High (Academia, Immigration in Australia, NZ, UK)',
        'format': 'Computer-based, AI scored',
        'result_time': 'Typically 2 days (can be up to 5)',
        'scoring': '10-90',
        'key_features': ['Fast results', 'Fully computer-scored including speaking'],
        'website': 'https://www.pearsonpte.com/',
    },
    {
        'name': 'Duolingo English Test',
        'cost': '~$59 USD',
        'duration': 'Approx. 1 hour',
        'acceptance': 'Growing (Many US universities)',
        'format': 'Computer-adaptive, at-home online proctoring',
        'result_time': 'Within 2 days',
        'scoring': '10-160',
        'key_features': ['Affordable and accessible', 'Can be taken online anytime'],
        'website': 'https://englishtest.duolingo.com/',
    },
]

PRE_DEPARTURE_TOOLKIT = [
    {
        'id': 'documents',
        'title': 'Essential Documents',
        'description': 'Keep these safe and accessible in your carry-on. Have both physical and digital copies.',
        'checklist': [
            'Passport & Visa',
            'University Admission Documents (Offer Letter, CoE/I-20/CAS)',
            'Academic Credentials (Transcripts, Certificates)',
            'Financial Proof (Copies of visa submission docs)',
            'Travel & Accommodation Details',
        ],
    },
    {
        'id': 'finances',
        'title': 'Financial Preparations',
        'description': 'Managing your money from day one is crucial for a stress-free experience.',
        'checklist': [
            'Exchange some cash into local currency for immediate needs.',
            'Inform your Nepali bank and enable cards for international use.',
            'Research and plan to open a local bank account upon arrival.',
            'Create a detailed monthly budget.',
        ],
    },
    {
        'id': 'packing',
        'title': 'Smart Packing Guide',
        'description': 'Pack smart, not heavy. Check customs rules for your destination.',
        'checklist': [
            'Carry-On: All documents, laptop, valuables, medications, and a change of clothes.',
            'Checked Luggage: Climate-appropriate clothing, universal adapter, and personal items.',
            'Avoid overpacking books or stationery; you can buy most things there.',
        ],
    },
    {
        'id': 'health',
        'title': 'Health & Insurance',
        'description': 'Ensure you are well-prepared for any medical needs.',
        'checklist': [
            'Confirm your Overseas Student Health Cover (OSHC/equivalent) is active.',
            'Complete a full health and dental check-up before you leave Nepal.',
            'Carry a sufficient supply of any prescription medication with the prescription.',
            'Ensure all vaccinations are up-to-date and carry the records.',
        ],
    },
    {
        'id': 'arrival',
        'title': 'Arrival & First Few Days',
        'description': 'A smooth arrival sets a positive tone for your entire journey.',
        'checklist': [
            'Have passport, visa, and university offer letter ready for immigration.',
            'Pre-plan your transport from the airport to your accommodation.',
            'Get a local SIM card for immediate connectivity.',
            'Attend all university orientation sessions.',
        ],
    },
]

APPOINTMENT_SERVICES = [
    ('ielts_class_inquiry', 'IELTS Class Inquiry'),
    ('pte_class_inquiry', 'PTE Class Inquiry'),
    ('general_consultation', 'General Education Consultation'),
    ('university_application_assistance', 'University Application Assistance'),
    ('visa_counseling_usa', 'Visa Counseling (USA)'),
    ('visa_counseling_australia', 'Visa Counseling (Australia)'),
    ('visa_counseling_uk', 'Visa Counseling (UK)'),
    ('visa_counseling_europe', 'Visa Counseling (Europe)'),
    ('visa_counseling_new_zealand', 'Visa Counseling (New Zealand)'),
    ('pre_departure_briefing', 'Pre-Departure Briefing'),
    ('career_counseling', 'Career Counseling'),
    ('other', 'Other (Please specify in notes)'),
]

APPOINTMENT_STAFF = [
    ('pradeep_khadka', 'Pradeep Khadka (CEO)'),
    ('pawan_acharye', 'Pawan Acharye'),
    ('any_available', 'Any Available Advisor'),
]

APPOINTMENT_TIME_SLOTS = [
    '09:00 AM - 09:30 AM', '09:30 AM - 10:00 AM', '10:00 AM - 10:30 AM', '10:30 AM - 11:00 AM',
    '11:00 AM - 11:30 AM', '11:30 AM - 12:00 PM', '12:00 PM - 12:30 PM', '12:30 PM - 01:00 PM',
    '01:00 PM - 01:30 PM', '01:30 PM - 02:00 PM', '02:00 PM - 02:30 PM', '02:30 PM - 03:00 PM',
    '03:00 PM - 03:30 PM', '03:30 PM - 04:00 PM', '04:00 PM - 04:30 PM', '04:30 PM - 05:00 PM',
]


def get_country(slug):
    return COUNTRIES_BY_SLUG.get(slug)


SOCIAL_PLATFORMS = [
    {'name': 'Facebook', 'url': SOCIAL_FACEBOOK},
    {'name': 'TikTok', 'url': SOCIAL_TIKTOK},
    {'name': 'YouTube', 'url': SOCIAL_YOUTUBE},
    {'name': 'Instagram', 'url': SOCIAL_INSTAGRAM},
]
