"""Demo records loaded by `flask seed-db` into empty tables."""

COMPANIES = [
    {
        'name': 'Quantum Leader',
        'logo_url': '/images/company_img/c1.png',
        'category': 'Blockchain & Fintech',
        'location': 'California, USA',
        'description': 'QuantumLedger is a blockchain-based fintech platform enabling ultra-secure, real-time '
                       'transaction processing and smart contract execution for global enterprises and digital banks.',
        'verified': True,
        'stage': 'Venture Stage',
        'website': 'https://www.quantumledger.io',
        'founded_year': 2018,
        'employee_count': '50-100',
        'funding_stage': 'Series B',
        'total_funding': '$25M',
        'investor_information': 'Backed by Andreessen Horowitz, Sequoia Capital',
        'product_description': 'A suite of blockchain-powered financial solutions including payment processing, '
                               'smart contracts and decentralized finance applications.',
        'business_model': 'SaaS with transaction fees',
        'target_market': 'Enterprise financial institutions, digital banks, and fintech companies',
        'competitive_landscape': 'Competing with traditional financial infrastructure providers and blockchain startups',
        'traction_metrics': 'Processing over $100M in monthly transaction volume with 50+ enterprise clients',
        'traction_score': 85,
        'notes': 'Strong technical team with ex-Google and ex-PayPal founders. Patented technology.',
    },
    {
        'name': 'Apiha Capital Lab',
        'logo_url': '/images/company_img/c2.png',
        'category': 'AI',
        'location': 'New York, USA',
        'description': 'Apiha Capital Lab is an AI-powered venture firm that scouts, evaluates, and accelerates '
                       'early-stage startups in AI, healthtech, and sustainable innovation across North America.',
        'verified': True,
        'stage': 'Growth Stage',
        'website': 'https://www.apihacapital.com',
        'founded_year': 2016,
        'employee_count': '20-50',
        'funding_stage': 'Series A',
        'total_funding': '$15M',
        'investor_information': 'Backed by Y Combinator, Founders Fund',
        'product_description': 'An AI platform that identifies promising startups and provides capital along '
                               'with strategic guidance.',
        'business_model': 'Equity-based investing with management fees',
        'target_market': 'Early-stage startups in AI, healthtech, and climate tech',
        'competitive_landscape': 'Competing with traditional VC firms and emerging AI-powered investment platforms',
        'traction_metrics': 'Portfolio of 35 companies with 3 successful exits',
        'traction_score': 78,
        'notes': 'Strong network in Silicon Valley and New York. Proprietary AI algorithms for startup evaluation.',
    },
    {
        'name': 'HealthGen Pharmaceuticals',
        'logo_url': '/images/company_img/c3.png',
        'category': 'HealthTech & AI',
        'location': 'Boston, USA',
        'description': 'HealthGen AI leverages artificial intelligence to revolutionize personalized medicine and '
                       'drug discovery, significantly reducing development timelines and improving patient outcomes.',
        'verified': True,
        'stage': 'Early Stage',
        'website': 'https://www.healthgenai.com',
        'founded_year': 2020,
        'employee_count': '10-20',
        'funding_stage': 'Seed',
        'total_funding': '$5M',
        'investor_information': 'Backed by Khosla Ventures, Biomatics Capital',
        'product_description': 'Machine learning over genomic data to identify potential drug targets.',
        'business_model': 'Research partnerships with pharmaceutical companies and licensing fees',
        'target_market': 'Pharmaceutical companies, research institutions, and healthcare providers',
        'competitive_landscape': 'Competing with traditional drug discovery methods and other AI healthcare startups',
        'traction_metrics': 'Two major partnerships with top-10 pharmaceutical companies',
        'traction_score': 65,
        'notes': 'Founded by former MIT researchers with strong backgrounds in computational biology.',
    },
    {
        'name': 'EcoSync Solutions',
        'logo_url': '/images/company_img/c4.png',
        'category': 'CleanTech',
        'location': 'Seattle, USA',
        'description': 'EcoSync Solutions develops smart grid technology that optimizes energy distribution and '
                       'consumption, enabling businesses and municipalities to reduce carbon footprint while cutting costs.',
        'verified': False,
        'stage': 'Growth Stage',
        'website': 'https://www.ecosyncsolutions.com',
        'founded_year': 2017,
        'employee_count': '50-100',
        'funding_stage': 'Series B',
        'total_funding': '$30M',
        'investor_information': 'Backed by Breakthrough Energy Ventures, Clean Energy Ventures',
        'product_description': 'Integrates with existing power infrastructure to optimize energy flow and reduce waste.',
        'business_model': 'Hardware sales with recurring software subscriptions',
        'target_market': 'Utilities, commercial buildings, and municipalities',
        'competitive_landscape': 'Competing with traditional energy management systems and emerging smart grid startups',
        'traction_metrics': 'Deployed in 15 cities across the US with demonstrable 20% energy savings',
        'traction_score': 82,
        'notes': 'Strong partnerships with major utility companies. Patented technology with proven results.',
    },
    {
        'name': 'NextGen Robotics',
        'logo_url': '/images/company_img/c5.png',
        'category': 'Robotics',
        'location': 'Austin, USA',
        'description': 'NextGen Robotics creates autonomous robotic solutions for warehousing and logistics, helping '
                       'businesses automate operations, increase efficiency, and reduce labor costs.',
        'verified': True,
        'stage': 'Late Stage',
        'website': 'https://www.nextgenrobotics.com',
        'founded_year': 2015,
        'employee_count': '100-250',
        'funding_stage': 'Series C',
        'total_funding': '$75M',
        'investor_information': 'Backed by Lux Capital, GV, and Siemens Next47',
        'product_description': 'Fully autonomous robots for warehouse picking, packing and inventory management.',
        'business_model': 'Robot-as-a-Service (RaaS) with monthly subscription fees',
        'target_market': 'E-commerce companies, warehouse operators, and logistics providers',
        'competitive_landscape': 'Competing with traditional warehouse automation solutions and other robotics startups',
        'traction_metrics': 'Deployed in over 50 facilities with 200% YoY growth',
        'traction_score': 90,
        'notes': 'Industry-leading technology with proven ROI for customers.',
    },
]

PEOPLE = [
    {
        'name': 'John Anderson',
        'avatar_url': '/images/users_img/u1.png',
        'category': 'Fintech',
        'location': 'New York, USA',
        'description': 'Serial entrepreneur with over 15 years of experience in fintech and blockchain. '
                       'Founded three successful startups with two exits.',
        'verified': True,
        'company': 'Quantum Leader',
        'position': 'Founder & CEO',
        'email': 'john@quantumledger.io',
        'linkedin': 'linkedin.com/in/johnanderson',
        'twitter': 'twitter.com/johnanderson',
        'education': 'MBA from Stanford, BS in Computer Science from MIT',
        'experience': 'Previously founded PayTech (acquired by Square) and served as CTO at BlockFin',
        'skills': 'Blockchain, Leadership, Product Strategy, Fundraising',
        'achievements': 'Forbes 30 Under 30, Raised over $100M in venture funding',
        'notes': 'Strong technical background combined with business acumen.',
    },
    {
        'name': 'Sarah Williams',
        'avatar_url': '/images/users_img/u2.png',
        'category': 'AI Research',
        'location': 'Boston, USA',
        'description': 'AI researcher and entrepreneur specializing in machine learning applications for healthcare.',
        'verified': False,
        'company': 'HealthGen AI',
        'position': 'Co-founder & CTO',
        'email': 'sarah@healthgenai.com',
        'linkedin': 'linkedin.com/in/sarahwilliams',
        'twitter': 'twitter.com/sarahw_ai',
        'education': 'PhD in Computer Science from MIT, MS in Biomedical Engineering from Johns Hopkins',
        'experience': 'Former research scientist at Google Brain',
        'skills': 'Machine Learning, Computer Vision, Computational Biology, Team Leadership',
        'achievements': 'Published 20+ papers in top AI journals',
        'notes': 'Deep technical expertise in AI and healthcare.',
    },
    {
        'name': 'Michael Chen',
        'avatar_url': '/images/users_img/u3.png',
        'category': 'CleanTech',
        'location': 'Seattle, USA',
        'description': 'Experienced executive with a background in renewable energy and smart grid technology.',
        'verified': True,
        'company': 'EcoSync Solutions',
        'position': 'CEO',
        'email': 'michael@ecosync.com',
        'linkedin': 'linkedin.com/in/michaelchen',
        'twitter': 'twitter.com/mchen_cleantech',
        'education': 'MBA from Harvard, BS in Electrical Engineering from UC Berkeley',
        'experience': 'Former VP of Product at Tesla Energy, Director of Operations at First Solar',
        'skills': 'Energy Systems, Business Development, Operations, Fundraising',
        'achievements': 'Scaled First Solar manufacturing operations by 300%',
        'notes': 'Well-connected with utility companies and regulators.',
    },
    {
        'name': 'Elena Rodriguez',
        'avatar_url': '/images/users_img/u4.png',
        'category': 'Venture Capital',
        'location': 'San Francisco, USA',
        'description': 'Venture capitalist specializing in early-stage investments in AI, fintech, and enterprise software.',
        'verified': True,
        'company': 'Apiha Capital Lab',
        'position': 'Managing Partner',
        'email': 'elena@apihacapital.com',
        'linkedin': 'linkedin.com/in/elenarodriguez',
        'twitter': 'twitter.com/elena_vc',
        'education': 'MBA from Wharton, BA in Economics from Princeton',
        'experience': 'Former Partner at Andreessen Horowitz, Investment Banker at Goldman Sachs',
        'skills': 'Deal Sourcing, Due Diligence, Portfolio Management, Fundraising',
        'achievements': 'Led investments in 3 unicorn companies',
        'notes': 'Known for providing hands-on support to portfolio companies.',
    },
    {
        'name': 'David Kim',
        'avatar_url': '/images/users_img/u5.png',
        'category': 'Robotics',
        'location': 'Austin, USA',
        'description': 'Robotics engineer and entrepreneur with expertise in autonomous systems and industrial automation.',
        'verified': True,
        'company': 'NextGen Robotics',
        'position': 'Founder & CTO',
        'email': 'david@nextgenrobotics.com',
        'linkedin': 'linkedin.com/in/davidkim',
        'twitter': 'twitter.com/davidkim_robots',
        'education': 'PhD in Robotics from Carnegie Mellon, BS in Mechanical Engineering from Georgia Tech',
        'experience': 'Former Lead Engineer at Boston Dynamics, Research Scientist at NASA JPL',
        'skills': 'Robotics Design, Computer Vision, Autonomous Navigation, Hardware Engineering',
        'achievements': 'Holds 12 patents in robotic systems',
        'notes': 'Well-respected in the robotics community.',
    },
]

# author_id is filled in with the bootstrap admin at seed time
BLOGS = [
    {
        'title': 'The Future of AI in Startup Ecosystems',
        'content': '<p>Artificial Intelligence is rapidly transforming the startup landscape. From fundraising '
                   'to product development, AI tools are enabling founders to move faster than ever before.</p>'
                   '<p>For founders, the message is clear: embrace AI or risk being left behind.</p>',
        'summary': 'How artificial intelligence is reshaping startup ecosystems and creating new opportunities '
                   'for founders and investors.',
        'image_url': '/images/blog_thumb/b1.png',
        'category': 'Technology',
        'tags': 'AI,Startups,Innovation,Venture Capital',
        'published': True,
        'publish_date': '2023-10-15',
    },
    {
        'title': 'Sustainable Business Models: Profit with Purpose',
        'content': '<p>The view that businesses must choose between profitability and sustainability is '
                   'increasingly being challenged by a new generation of companies.</p>'
                   '<ul><li>Circular economy practices</li><li>Supply chain transparency</li></ul>',
        'summary': 'How companies are incorporating sustainability into their business models to achieve both '
                   'profit and positive environmental impact.',
        'image_url': '/images/blog_thumb/b2.jpg',
        'category': 'Sustainability',
        'tags': 'ESG,Sustainability,Business Models,Social Impact',
        'published': True,
        'publish_date': '2023-11-03',
    },
    {
        'title': 'Fundraising Strategies for Early-Stage Startups in 2023',
        'content': '<p>Securing funding for early-stage startups has evolved significantly in the past few years.</p>'
                   '<p>Startups with clear traction metrics and efficient unit economics still attract investment.</p>',
        'summary': "A practical guide to fundraising tactics that work in today's competitive investment "
                   'landscape for early-stage founders.',
        'image_url': '/images/blog_thumb/b3.png',
        'category': 'Fundraising',
        'tags': 'Venture Capital,Fundraising,Pitch Deck,Investor Relations',
        'published': True,
        'publish_date': '2023-12-07',
    },
    {
        'title': 'Building a Diverse and Inclusive Startup Culture',
        'content': '<p>Research consistently shows that diverse teams make better decisions and build more '
                   'successful companies.</p><ul><li>Bias-free hiring processes</li>'
                   '<li>Inclusive onboarding experiences</li></ul>',
        'summary': 'How startups can build diverse and inclusive company cultures that drive innovation and '
                   'business performance.',
        'image_url': '/images/blog_thumb/b4.png',
        'category': 'Team Building',
        'tags': 'Diversity,Inclusion,Company Culture,Hiring',
        'published': True,
        'publish_date': '2024-01-18',
    },
    {
        'title': 'The Role of Community in Product-Led Growth',
        'content': '<p>The most successful product-led companies are discovering that community-building '
                   'amplifies growth dramatically.</p>',
        'summary': 'Exploring how user communities can enhance product-led growth strategies and create '
                   'sustainable competitive advantages.',
        'image_url': '/images/blog_thumb/b5.jpg',
        'category': 'Growth',
        'tags': 'Community,Product-Led Growth,Customer Acquisition,SaaS',
        'published': False,
        'publish_date': None,
    },
]
