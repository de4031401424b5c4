SERVER_INSTRUCTIONS = (
    "A specialized Model Context Protocol server that provides interactive quiz "
    "functionality across various knowledge domains. This server offers customizable "
    "quizzes with different categories and difficulty levels, allowing users to test "
    "their knowledge in general knowledge, science, history, geography, and "
    "entertainment. Each quiz provides immediate feedback and correct answers, making "
    "it an educational and engaging tool for learning and assessment."
)

GET_QUIZ_DESCRIPTION = (
    "Provides an interactive quiz on various topics. This tool generates quiz questions "
    "based on specified categories and difficulty levels. Users can request quizzes in "
    "domains like general knowledge, science, history, geography, and entertainment, "
    "with difficulty levels ranging from easy to hard. Each response includes a "
    "carefully selected question and its corresponding answer to facilitate learning "
    "and knowledge testing. Ideal for educational purposes, trivia games, or casual "
    "learning experiences."
)
