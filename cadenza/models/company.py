"""Company model."""
from cadenza.extensions import db
from cadenza.models.base import SerializerMixin, TimestampMixin


class Company(SerializerMixin, TimestampMixin, db.Model):
    __tablename__ = 'companies'

    SEARCH_FIELDS = ('name', 'description', 'category', 'location')
    WRITABLE_FIELDS = (
        'name', 'logo_url', 'category', 'location', 'description', 'verified',
        'stage', 'website', 'founded_year', 'employee_count', 'funding_stage',
        'total_funding', 'investor_information', 'product_description',
        'business_model', 'target_market', 'competitive_landscape',
        'traction_metrics', 'traction_score', 'notes',
    )

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    logo_url = db.Column(db.String(500))
    category = db.Column(db.String(100), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    verified = db.Column(db.Boolean, default=False, nullable=False)

    # Profile
    stage = db.Column(db.String(100))  # e.g. 'Venture Stage'
    website = db.Column(db.String(500))
    founded_year = db.Column(db.Integer)
    employee_count = db.Column(db.String(100))  # e.g. '50-100'

    # Funding and traction
    funding_stage = db.Column(db.String(100))
    total_funding = db.Column(db.String(100))
    investor_information = db.Column(db.Text)
    product_description = db.Column(db.Text)
    business_model = db.Column(db.Text)
    target_market = db.Column(db.Text)
    competitive_landscape = db.Column(db.Text)
    traction_metrics = db.Column(db.Text)
    traction_score = db.Column(db.Integer)  # 0-100
    notes = db.Column(db.Text)

    def __repr__(self):
        return f'<Company {self.name}>'
