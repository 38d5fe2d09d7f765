# reviewlens/messages/analysis_messages.py

# ✅ Positive
SENTIMENT_ANALYSIS_SUCCESS = "Sentiment analysis completed successfully."
RESTAURANT_SENTIMENT_SUCCESS = "Restaurant sentiment analytics computed."
IMPROVEMENTS_SUCCESS = "Improvement suggestions computed."
NO_NEGATIVE_REVIEWS = "No recent negative reviews; nothing to improve."
COMPARISON_SUCCESS = "Restaurant comparison computed."


# ❌ Errors
RESTAURANT_NOT_FOUND = "Restaurant not found."
RESTAURANTS_NOT_FOUND = "One or more restaurants not found."
COMPARE_IDS_REQUIRED = "Restaurant IDs are required for comparison."
COMPARE_COUNT_INVALID = "Please provide between 2 and 5 restaurants to compare."
IMPROVEMENTS_FORBIDDEN = "Not authorized to access improvement suggestions."
ANALYSIS_FAILED = "Sentiment analysis failed due to internal server error."
INVALID_PERIOD = "Unknown period. Use one of: {periods}."
