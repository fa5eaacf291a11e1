"""Marker phrases for the health topic filter.

Order matters only for which phrase is reported in debug logs; the
non-health list is always checked before the health list.
"""

HEALTH_KEYWORDS = (
    # Medical terms
    "symptom", "disease", "illness", "infection", "pain", "ache", "fever", "cold", "flu",
    "cough", "headache", "nausea", "vomit", "diarrhea", "constipation", "allergy",
    # Body parts
    "heart", "lung", "stomach", "liver", "kidney", "brain", "skin", "bone", "muscle",
    "blood", "throat", "ear", "eye", "nose", "chest", "back", "joint", "head",
    # Health & wellness
    "health", "medical", "medicine", "medication", "drug", "prescription", "doctor",
    "hospital", "clinic", "treatment", "therapy", "cure", "heal", "recover",
    # Nutrition & diet
    "nutrition", "diet", "food", "vitamin", "protein", "carb", "fat", "calorie",
    "nutrient", "meal", "eating", "weight", "obesity", "diabetes", "cholesterol",
    # Fitness & exercise
    "exercise", "fitness", "workout", "yoga", "gym", "running", "walking", "cardio",
    "strength", "training", "sport", "physical activity",
    # Mental health
    "mental health", "stress", "anxiety", "depression", "sleep", "insomnia", "therapy",
    "counseling", "psychology", "mood", "emotion", "wellbeing", "wellness",
    # First aid & emergencies
    "first aid", "emergency", "injury", "wound", "burn", "cut", "bruise", "fracture",
    "bleeding", "cpr", "choking",
    # Preventive care
    "vaccine", "vaccination", "immunization", "screening", "checkup", "prevention",
    "hygiene", "sanitation", "wash hands",
    # Conditions & diseases
    "cancer", "tumor", "hypertension", "asthma", "arthritis", "migraine", "stroke",
    "covid", "coronavirus", "pandemic", "epidemic", "chronic", "acute",
    # General wellness
    "tired", "fatigue", "energy", "weak", "dizzy", "pregnant", "pregnancy", "baby",
    "child health", "senior", "aging", "immune", "breath", "swelling", "rash",
)

NON_HEALTH_KEYWORDS = (
    "weather", "sports score", "movie", "recipe", "cooking", "politics", "news",
    "stock", "market", "bitcoin", "crypto", "game", "programming", "code",
    "math problem", "homework", "history", "geography", "travel", "hotel",
    "restaurant", "shopping", "fashion", "music", "song", "lyrics",
)

QUESTION_WORDS = (
    "what", "how", "why", "when", "where", "can", "should", "is", "are", "do", "does",
)

# Queries shorter than this with no question word are treated as off-topic
MIN_STATEMENT_TOKENS = 3
