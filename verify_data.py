import sys
import logging
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent))

from duel.battle import Difficulty
from duel.resources.database import OpponentDatabase

def main():
    logging.basicConfig(level=logging.INFO)
    logger = logging.getLogger("DataVerification")
    
    try:
        # Initialize Database
        db = OpponentDatabase()
        
        # Load all data
        logger.info("Loading opponent tables...")
        db.load_all()
        
        # Every difficulty needs an opponent with both basic actions
        for difficulty in Difficulty:
            opponent = db.create_opponent(difficulty)
            assert opponent.default_attack is not None, f"{opponent.name} has no basic attack"
            assert opponent.defend_skill is not None, f"{opponent.name} cannot defend"
            logger.info(f"{difficulty.value}: {opponent.name} ({len(opponent.skills)} skills)")
        
        # Hard opponents rely on a DEF debuff
        hard = db.get_opponent(Difficulty.HARD)
        assert any(s.kind == "debuff" for s in hard.skills), "Hard opponent has no debuff"
        
        logger.info("VERIFICATION SUCCESSFUL: All opponent tables loaded and validated.")
        
    except Exception as e:
        logger.error(f"VERIFICATION FAILED: {e}")
        sys.exit(1)

if __name__ == "__main__":
    main()
