# reviewlens/messages/review_messages.py

# ✅ Positive
REVIEW_CREATED = "Review created successfully."
REVIEW_UPDATED = "Review updated successfully."
REVIEW_DELETED = "Review deleted successfully."

# ❌ Errors
REVIEW_NOT_FOUND = "Review not found."
REVIEW_ALREADY_EXISTS = "You have already reviewed this restaurant."
REVIEW_TEXT_TOO_SHORT = "Review must be at least {min_length} characters."
INVALID_RATING = "Rating must be a whole number between 1 and 5."
INVALID_VISIBILITY = "Visibility must be either 'public' or 'private'."
REVIEW_FORBIDDEN = "Not authorized to modify this review."
REVIEW_SAVE_FAILED = "Failed to save the review due to internal server error."
