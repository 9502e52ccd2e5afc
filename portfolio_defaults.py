"""Baseline agent portfolio (executive leverage context)."""

from portfolio_config import COLORS, AgentIdea, Category, PortfolioConfig, RoadmapPhase


def _strategic_intelligence() -> Category:
    area = "Strategic Intelligence"
    return Category(
        label="\U0001f3af STRATEGIC INTELLIGENCE",
        color=COLORS["purple"],
        agents=[
            AgentIdea(area, "Competitive Intelligence Agent",
                      "Monitors 20+ competitors daily - tracks publications, patents, clinical trials. Alerts on significant developments.",
                      "3 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Research Trend Scanner",
                      "Identifies emerging cancer research trends 6-12 months before mainstream through citation velocity analysis.",
                      "2 hours", "HIGH", "High", quick_win=True),
            AgentIdea(area, "IP Landscape Monitor",
                      "Tracks patent landscape, identifies freedom-to-operate risks and white space opportunities.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Grant Intelligence Agent",
                      "Finds relevant grants (NIH, NSF, DOD), analyzes winning proposals, estimates success probability.",
                      "3 hours", "HIGH", "Medium", quick_win=True),
        ],
    )


def _investor_relations() -> Category:
    area = "Investor Relations"
    return Category(
        label="\U0001f4bc INVESTOR RELATIONS",
        color=COLORS["blue"],
        agents=[
            AgentIdea(area, "Investor Update Generator",
                      "Auto-generates weekly/monthly investor updates from research progress, milestones, and achievements.",
                      "4 hours", "HIGH", "Low", quick_win=True),
            AgentIdea(area, "Pitch Deck Intelligence",
                      "Keeps pitch deck current with latest milestones, competitive landscape, publications, team accomplishments.",
                      "2 hours", "MEDIUM", "Low", quick_win=True),
            AgentIdea(area, "Fundraising Opportunity Scanner",
                      "Identifies potential investors, tracks VC fund raises, suggests timing and warm intro paths.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Grant Writing Assistant",
                      "Helps write and improve grant proposals based on winning examples and reviewer feedback patterns.",
                      "3 hours", "HIGH", "High"),
        ],
    )


def _research_oversight() -> Category:
    area = "Research Oversight"
    return Category(
        label="\U0001f52c RESEARCH OVERSIGHT",
        color=COLORS["green"],
        agents=[
            AgentIdea(area, "Breakthrough Detector",
                      "Flags significant research findings from team before formal reporting. Suggests patent opportunities.",
                      "1 hour", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Research Portfolio Dashboard",
                      "Real-time view of all projects: status, blockers, dependencies, timeline, risk flags.",
                      "2 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Publication Opportunity Finder",
                      "Matches research to journals, estimates acceptance likelihood, tracks submission deadlines.",
                      "1 hour", "MEDIUM", "Low"),
            AgentIdea(area, "Collaboration Matchmaker",
                      "Identifies external collaboration opportunities, finds complementary research partners.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Research ROI Tracker",
                      "Tracks cost per publication, grant success rates, program efficiency across all research areas.",
                      "1 hour", "MEDIUM", "Low"),
        ],
    )


def _team_management() -> Category:
    area = "Team Management"
    return Category(
        label="\U0001f465 TEAM MANAGEMENT",
        color=COLORS["orange"],
        agents=[
            AgentIdea(area, "Team Health Monitor",
                      "Analyzes communication patterns to detect burnout, disengagement before they escalate.",
                      "1 hour", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Talent Pipeline Agent",
                      "Monitors top researchers in your field for hiring. Tracks publication records, identifies unhappy researchers.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Productivity Insights",
                      "Shows team blockers without micromanaging. Identifies bottlenecks and suggests process improvements.",
                      "1 hour", "MEDIUM", "Low"),
            AgentIdea(area, "Onboarding Accelerator",
                      "Creates personalized onboarding plans for new hires based on role and background.",
                      "1 hour", "LOW", "Low"),
        ],
    )


def _business_development() -> Category:
    area = "Business Development"
    return Category(
        label="\U0001f91d BUSINESS DEVELOPMENT",
        color=COLORS["cyan"],
        agents=[
            AgentIdea(area, "Partnership Opportunity Scanner",
                      "Finds pharma/biotech working on complementary research. Identifies partnership fit and warm intros.",
                      "3 hours", "HIGH", "High", quick_win=True),
            AgentIdea(area, "Clinical Trial Intelligence",
                      "Monitors relevant trials, identifies unmet needs, finds trial sponsors and partnership opportunities.",
                      "2 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Licensing Opportunity Agent",
                      "Finds in-licensing and out-licensing opportunities. Tracks patent auctions and technology transfers.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Conference ROI Analyzer",
                      "Recommends which conferences to attend/sponsor based on attendee analysis and partnership ROI.",
                      "1 hour", "LOW", "Low"),
            AgentIdea(area, "Market Intelligence",
                      "Tracks cancer drug market trends, competitor pipelines, M&A activity, and exit opportunities.",
                      "2 hours", "MEDIUM", "Medium"),
        ],
    )


def _communications() -> Category:
    area = "Communications"
    return Category(
        label="\U0001f4e7 COMMUNICATIONS & ADMIN",
        color=COLORS["pink"],
        agents=[
            AgentIdea(area, "Email Prioritizer",
                      "Sorts 200+ daily emails into: urgent/review/delegate/ignore with smart summaries.",
                      "5 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Meeting Prep Agent",
                      "Prepares briefing docs for every meeting: attendee background, talking points, suggested outcomes.",
                      "3 hours", "HIGH", "Low", quick_win=True),
            AgentIdea(area, "Board Report Generator",
                      "Compiles monthly board reports from research progress, financials, team updates automatically.",
                      "4 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Internal Announcements Writer",
                      "Drafts team communications: milestone celebrations, new hires, policy updates.",
                      "1 hour", "LOW", "Low"),
            AgentIdea(area, "LinkedIn Content Generator",
                      "Creates LinkedIn posts highlighting research achievements, team milestones, thought leadership.",
                      "2 hours", "MEDIUM", "Low"),
            AgentIdea(area, "Press Release Writer",
                      "Drafts press releases for significant research breakthroughs and company milestones.",
                      "2 hours", "MEDIUM", "Low"),
        ],
    )


def _financial_operations() -> Category:
    area = "Financial"
    return Category(
        label="\U0001f4b0 FINANCIAL OPERATIONS",
        color=COLORS["yellow"],
        font_color=COLORS["black"],
        agents=[
            AgentIdea(area, "Budget Optimizer",
                      "Recommends resource reallocation based on research progress and ROI analysis.",
                      "2 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Burn Rate Monitor",
                      "Tracks spending velocity daily, alerts on budget risks, calculates runway.",
                      "1 hour", "HIGH", "Low", quick_win=True),
            AgentIdea(area, "Research ROI Analyzer",
                      "Calculates cost per publication, grant success ROI, program efficiency. Investment recommendations.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Vendor Intelligence",
                      "Monitors equipment/service vendors for better pricing, tracks contract renewals, suggests alternatives.",
                      "1 hour", "LOW", "Low"),
        ],
    )


def _regulatory() -> Category:
    area = "Regulatory"
    return Category(
        label="⚖️ REGULATORY & COMPLIANCE",
        color=COLORS["red"],
        agents=[
            AgentIdea(area, "Regulatory Intelligence",
                      "Monitors FDA/regulatory changes affecting ACM research. Tracks approval trends and competitor approvals.",
                      "2 hours", "MEDIUM", "Medium"),
            AgentIdea(area, "Risk Monitor",
                      "Flags compliance risks, research ethics issues, safety concerns, IP infringement risks.",
                      "1 hour", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Audit Preparation",
                      "Maintains audit-ready documentation, flags potential audit issues before they become problems.",
                      "1 hour", "MEDIUM", "Low"),
        ],
    )


def _personal_productivity() -> Category:
    area = "Personal"
    return Category(
        label="\U0001f9e0 PERSONAL PRODUCTIVITY",
        color=COLORS["indigo"],
        agents=[
            AgentIdea(area, "Decision Intelligence",
                      "Summarizes complex issues with pros/cons, risk assessment, data-driven recommendations.",
                      "3 hours", "HIGH", "High", quick_win=True),
            AgentIdea(area, "Reading Digest Agent",
                      "Curates must-read papers, industry news, competitor updates into 10-minute daily digest.",
                      "5 hours", "HIGH", "Medium", quick_win=True),
            AgentIdea(area, "Calendar Optimizer",
                      "Suggests meeting consolidation, blocks focus time, identifies unnecessary meetings.",
                      "2 hours", "MEDIUM", "Low", quick_win=True),
            AgentIdea(area, "Travel Coordinator",
                      "Books travel, manages itineraries, prepares trip briefs with meeting schedules and local intel.",
                      "2 hours", "LOW", "Low"),
        ],
    )


def agent_force_baseline() -> PortfolioConfig:
    return PortfolioConfig(
        title="\U0001f916 MADHAVAN'S AI AGENT FORCE\nIntelligent Agents to 10x Your\nExecutive Leverage",
        subtitle=(
            "Total Time Saved: 67 hours/week\n"
            "Your Current Week: 80 hours →\n"
            "Future Week: 40 hours strategic"
        ),
        instructions=(
            "INSTRUCTIONS: Rate each agent 1-5 (1=Low Priority, 5=Critical)\n"
            "We'll build your top 5 first"
        ),
        quick_win_hours="25 hrs/week",
        total_hours="67 hrs/week",
        categories=[
            _strategic_intelligence(),
            _investor_relations(),
            _research_oversight(),
            _team_management(),
            _business_development(),
            _communications(),
            _financial_operations(),
            _regulatory(),
            _personal_productivity(),
        ],
        roadmap_phases=[
            RoadmapPhase(4, "PHASE 1: FOUNDATIONS (Weeks 1-4)\nQuick wins with immediate impact", COLORS["blue"]),
            RoadmapPhase(10, "PHASE 2: INTELLIGENCE (Weeks 5-12)\nStrategic and analytical agents", COLORS["cyan"]),
            RoadmapPhase(16, "PHASE 3: AUTOMATION (Weeks 13-24)\nProcess optimization agents", COLORS["green"]),
        ],
    )
