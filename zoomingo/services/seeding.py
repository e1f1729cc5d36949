"""Create tables and seed the scenario catalog on first start."""
import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from zoomingo.db.base import Base
from zoomingo.db.session import make_sessionmaker
from zoomingo.models.scenario import Scenario

logger = logging.getLogger(__name__)

FREE_SCENARIO = "Someone asks \"Can everyone see my screen?\""

SCENARIOS = [
    "You're on mute!",
    "Someone forgets to unmute before talking",
    "A dog barks in the background",
    "A child walks into the frame",
    "Someone's video freezes mid-sentence",
    "\"Can you hear me now?\"",
    "Someone joins late and asks what they missed",
    "Echo from two people in the same room",
    "Someone is eating on camera",
    "A cat walks across the keyboard",
    "\"Sorry, go ahead.\" \"No, you go ahead.\"",
    "Someone shares the wrong window",
    "A notification sound interrupts the speaker",
    "Someone is still in pajamas",
    "The host forgets to stop sharing",
    "Someone's internet drops out",
    "A virtual background eats someone's head",
    "\"I think you're still muted.\"",
    "Someone types loudly while unmuted",
    "Two people talk at the same time",
    "Someone leaves and rejoins the call",
    "A doorbell rings",
    "Someone says \"Let's take this offline\"",
    "The meeting runs over time",
    "Someone's camera is pointed at the ceiling",
    "Someone asks for the meeting link in chat",
    "A phone rings in the background",
    "Someone is clearly in a car",
    "\"Next slide, please.\"",
    "Someone's face is lit only by the screen",
    "A lawnmower or leaf blower outside",
    "Someone forgets they are on camera",
    "The chat has a side conversation",
    "Someone says \"You were breaking up\"",
    "Someone waves goodbye for too long",
    "Awkward silence after a question",
    "Someone uses a filter by accident",
    "\"Can everyone mute who isn't speaking?\"",
    "Someone's audio is a robot voice",
    "Someone holds something up to the camera",
    "A toilet flushes",
    "Someone's battery is about to die",
    "The host can't find the record button",
    "Someone presents with notes visible",
    "\"I'll send the slides afterwards.\"",
    "Someone drinks from a giant mug",
    "Someone's background has a messy bed",
    "A plant is the main visual focus",
    "Someone says \"Hello? Hello?\"",
    "Someone asks \"Is this being recorded?\"",
    "Laggy audio makes someone repeat themselves",
    "Someone's face is too close to the camera",
    "Someone joins with audio only",
    "Someone's name on screen is wrong",
    "A baby cries in the background",
    "Someone stands up and forgets they aren't wearing pants",
    "\"Let me just share my screen.\"",
    "The meeting could have been an email",
    "Someone accidentally leaves the call",
    "Someone's microphone picks up the TV",
    "A construction noise drowns out the speaker",
    "Someone asks a question already answered in chat",
    "Someone's Wi-Fi name is visible on screen",
    "Someone is walking while on the call",
    "Someone says \"Sorry, I was on mute\"",
    "A roommate walks behind someone",
    "Someone is wearing headphones with a giant mic",
    "The call starts five minutes late",
    "Someone says \"Can you see me?\"",
    "Someone's camera is upside down",
    "Feedback squeal from a speaker",
    "Someone forgets to turn their camera on",
    "Someone's pet gets a formal introduction",
    "Someone's screen share is too small to read",
    "Someone says \"We're at time, so...\"",
    "Someone uses the raise hand button",
    "Someone's smoke alarm chirps",
    "\"Does anyone have any questions?\" Silence.",
    "Someone is sitting in a closet for quiet",
    "Someone's kid says hello to everyone",
    "Someone drops off and comes back with a new name",
]


async def seed_scenarios(db: AsyncSession) -> None:
    """Insert the free scenario (id 1) and the catalog once; no-op if scenarios exist."""
    count = await db.scalar(select(func.count(Scenario.id)))
    if count:
        return

    db.add(Scenario(id=1, text=FREE_SCENARIO, is_free=True))
    await db.flush()
    db.add_all(Scenario(text=text, is_free=False) for text in SCENARIOS)
    await db.commit()
    logger.info("Seeded %d scenarios", len(SCENARIOS) + 1)


async def init_db(engine: AsyncEngine) -> None:
    """Create missing tables and seed the catalog."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with make_sessionmaker(engine)() as db:
        await seed_scenarios(db)
