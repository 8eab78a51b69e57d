"""
Prompts for vital-sign health suggestions.
"""
SUGGESTION_SYSTEM_PROMPT = "You are a health monitoring assistant."

SUGGESTION_USER_PROMPT = (
    "A patient has the following health readings:\n"
    "- Body Temperature: {temperature:.1f}°C\n"
    "- Pulse Rate: {pulse_rate:.1f} BPM\n"
    "- SpO₂ Level: {oxygen_saturation:.1f}%\n"
    "\n"
    "Based on these values, please provide a health assessment and any "
    "recommendations in {language}."
)
