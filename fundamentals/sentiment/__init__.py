from .composite_sentiment import calculate_composite_sentiment, get_sentiment_explanation

__all__ = ['calculate_composite_sentiment', 'get_sentiment_explanation']
