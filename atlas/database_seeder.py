# atlas/database_seeder.py
import logging
from sqlalchemy.orm import Session
from typing import List, Dict, Any

from atlas.database import SessionLocal
from atlas.models.rule import RuleEntry
from atlas.config import get_settings

logger = logging.getLogger(__name__)

# Conditions every world starts with; shared and read-only
BASELINE_RULES: List[Dict[str, Any]] = [
    {
        "name": "Blinded",
        "category": "Conditions",
        "description": "A blinded creature can't see and automatically fails any ability check that requires sight.",
        "details": [
            "Attack rolls against the creature have advantage.",
            "The creature's attack rolls have disadvantage."
        ]
    },
    {
        "name": "Charmed",
        "category": "Conditions",
        "description": "A charmed creature can't attack the charmer or target the charmer with harmful abilities or magical effects.",
        "details": [
            "The charmer has advantage on any ability check to interact socially with the creature."
        ]
    },
    {
        "name": "Exhaustion",
        "category": "Conditions",
        "description": "Some special abilities and environmental hazards can lead to a special condition called exhaustion.",
        "details": [
            "Level 1: Disadvantage on ability checks",
            "Level 2: Speed halved",
            "Level 3: Disadvantage on attack rolls and saving throws",
            "Level 4: Hit point maximum halved",
            "Level 5: Speed reduced to 0",
            "Level 6: Death"
        ]
    },
    {
        "name": "Grappled",
        "category": "Conditions",
        "description": "A grappled creature's speed becomes 0, and it can't benefit from any bonus to its speed.",
        "details": [
            "The condition ends if the grappler is incapacitated.",
            "The condition also ends if an effect removes the grappled creature from the reach of the grappler."
        ]
    },
    {
        "name": "Invisible",
        "category": "Conditions",
        "description": "An invisible creature is impossible to see without the aid of magic or a special sense.",
        "details": [
            "Attack rolls against the creature have disadvantage.",
            "The creature's attack rolls have advantage."
        ]
    },
    {
        "name": "Prone",
        "category": "Conditions",
        "description": "A prone creature's only movement option is to crawl, unless it stands up.",
        "details": [
            "The creature has disadvantage on attack rolls.",
            "An attack roll against the creature has advantage if the attacker is within 5 feet. Otherwise, the attack roll has disadvantage."
        ]
    },
    {
        "name": "Short Rest",
        "category": "Resting",
        "description": "A period of downtime, at least 1 hour long, during which a character does nothing more strenuous than eating, drinking, reading, and tending to wounds.",
        "details": [
            "A character can spend one or more Hit Dice at the end of a short rest."
        ]
    },
    {
        "name": "Long Rest",
        "category": "Resting",
        "description": "A period of extended downtime, at least 8 hours long, during which a character sleeps or performs light activity.",
        "details": [
            "A character regains all lost hit points at the end of a long rest.",
            "A character can't benefit from more than one long rest in a 24-hour period."
        ]
    }
]


def seed_baseline_rules(db: Session) -> List[RuleEntry]:
    """Create the shared baseline rules if none exist."""
    existing_rules = db.query(RuleEntry).filter(RuleEntry.world_id.is_(None)).all()
    if existing_rules:
        logger.info(f"Found {len(existing_rules)} existing baseline rules")
        return existing_rules

    rules = [RuleEntry(world_id=None, is_public=True, **data) for data in BASELINE_RULES]
    db.add_all(rules)
    db.commit()

    logger.info(f"Created {len(rules)} baseline rules")
    return rules


def seed_database():
    """Seed the database with the shared reference content."""
    if not get_settings().SEED_BASELINE_RULES:
        logger.info("Baseline rule seeding disabled")
        return

    db = SessionLocal()
    try:
        seed_baseline_rules(db)
    except Exception as e:
        db.rollback()
        logger.error(f"Error seeding database: {str(e)}")
        raise
    finally:
        db.close()
