# User-facing text. Templates take {company} (and the named fields shown) via str.format.

STAGE_PROMPTS = {
    "greeting": (
        "Welcome to {company}'s Wealth Planning Assistant!\n\n"
        "I'm here to help you discover how wealthy you could become. "
        "Let's create a personalized projection together.\n\n"
        "To get started, what's your current age?"
    ),
    "age": "What's your current age?",
    "income": "Great! Now, what's your annual income? (You can enter an approximate amount)",
    "current_savings": "How much do you currently have saved and invested in total?",
    "monthly_savings": "How much do you save each month? (money set aside for emergencies, goals, etc.)",
    "monthly_investment": "And how much do you invest each month? (retirement accounts, stocks, etc.)",
    "increase_goal": (
        "By what percentage would you like to increase your monthly savings and investments? "
        "(e.g., 10, 20, 50)"
    ),
    "bonus_savings": (
        "Excellent! Now let's factor in {company}. On average, our users save an additional "
        "$150-500/month by controlling impulse purchases. {suggestion}\n\n"
        "How much do you think {company} could help you save per month? (Enter your estimate)"
    ),
    "projection": "Calculating your wealth projection...",
    "free_chat": (
        "Feel free to ask me anything about your financial projection "
        "or how to improve your wealth-building strategy!"
    ),
}

BONUS_SUGGESTION = "Based on your income level, {company} users typically save an additional {amount}/month."

VALIDATION_ERRORS = {
    "unparseable": "I couldn't find a number in your response. Please enter a number.",
    "age": "Please enter a valid age between 18 and 100.",
    "annual_income": "Please enter a valid income amount (can be 0 if you're not currently earning).",
    "current_savings": "Please enter a valid amount for your current savings (0 to 10,000,000,000).",
    "monthly_savings": "Please enter a valid monthly savings amount (0 to 10,000,000).",
    "monthly_investment": "Please enter a valid monthly investment amount (0 to 10,000,000).",
    "increase_percentage": "Please enter a reasonable percentage increase (0-500%).",
    "bonus_savings": (
        "Please enter a reasonable monthly savings estimate from {company} (e.g., 100, 200, 500)."
    ),
}

DISCLAIMER = (
    "Important: this projection is for educational purposes only and is not financial advice. "
    "The 11% annual return before age 70 is based on historical S&P 500 averages and the 6% after "
    "age 70 is a conservative assumption; actual returns may vary significantly. Past performance "
    "does not guarantee future results. Please consult a qualified financial advisor for "
    "personalized advice."
)

SHORT_DISCLAIMER = "*For educational purposes only. Not financial advice. Consult a professional for personalized guidance.*"

GUARDRAIL_RESPONSES = {
    "jailbreak-attempt": (
        "I'm designed specifically to help you with financial planning and wealth projection. "
        "I can't change my role or set aside my guidelines. How can I help you understand your "
        "financial future better?"
    ),
    "pii-request": (
        "I don't collect or store personal identification information like social security numbers, "
        "bank account details, or passwords. I only use the financial data you share during our "
        "conversation to create your wealth projection. Is there something about your projection "
        "you'd like to explore?"
    ),
    "inappropriate": (
        "I'm here to help you with financial planning and wealth building. Let's keep our conversation "
        "focused on your financial goals. What would you like to know about saving or investing?"
    ),
}

OFF_TOPIC_RESPONSES = {
    "programming": (
        "I appreciate your curiosity! However, I'm specifically designed to help you with financial "
        "planning and wealth projection through {company}. Programming questions are outside my "
        "expertise here. Is there anything about your savings goals or investment planning I can "
        "help you with instead?"
    ),
    "weather": (
        "Great question, but I'm your financial planning assistant, not a weather service! I'm here to "
        "help you understand how your savings and investments can grow over time. Would you like to "
        "explore how {company} can help you save more?"
    ),
    "sports": (
        "While I'd love to chat about sports, my specialty is helping you build wealth! I'm here to "
        "project how your savings can grow and show you the impact of {company} savings. What would "
        "you like to know about your financial future?"
    ),
    "politics": (
        "I focus exclusively on personal finance and wealth building. Political topics are outside my "
        "area of expertise. Let me help you with something I'm great at - projecting your wealth "
        "growth! Would you like to see how much you could save?"
    ),
    "general": (
        "That's an interesting question, but I'm a specialized financial planning assistant for "
        "{company}. My expertise is in helping you understand your wealth-building potential and how "
        "our savings tools can help you reach your goals faster. Is there anything about saving money, "
        "investing, or financial planning I can help you with?"
    ),
}

RESPONDER_FAILURES = {
    "timeout": "The request took too long. Please try again in a moment.",
    "rate_limited": "I'm receiving too many requests. Please wait a moment and try again.",
    "auth": "There's an issue with the assistant's configuration. Please contact support.",
    "generic": "I'm having trouble connecting right now. Please try again shortly.",
}

RESTART_PROMPT = "Let's create a new projection! What's your current age?"

LOCAL_REPLIES = {
    "retirement": (
        "Great question about retirement! Based on your projection, you could have about {at_70} by "
        "age 70 with {company}. A common rule of thumb is to have 25x your annual expenses saved. "
        "To reach {goal} by 70 you'd need to put away roughly {monthly_needed}/month."
    ),
    "investment": (
        "Investing is crucial for wealth building! Your projection assumes an 11% average annual return "
        "until age 70 and a more conservative 6% afterwards. Diversification across stocks, bonds, and "
        "other assets is key. Remember, {company} helps you have more to invest by reducing impulse "
        "spending!"
    ),
    "savings_tips": (
        "Excellent mindset! Here are some tips:\n\n"
        "1. **Use {company}** to control impulse purchases\n"
        "2. **Automate savings** - pay yourself first\n"
        "3. **50/30/20 rule** - 50% needs, 30% wants, 20% savings\n"
        "4. **Track every expense** for a month to find leaks\n\n"
        "At your current pace you'd reach your first {first_goal} in about {years} years. "
        "Would you like to recalculate your projection with higher savings?"
    ),
    "education": (
        "Compound interest means your money earns returns, and those returns earn returns. In your "
        "projection, {company} adds {bonus_30} over 30 years mostly through compounding - that's why "
        "starting early is so powerful!"
    ),
    "product_info": (
        "{company} is a browser extension that helps you take control of your online spending.\n\n"
        "- Set daily, weekly, or monthly spending allowances\n"
        "- Get alerts before you exceed your limits\n"
        "- Identify and reduce impulse purchases\n\n"
        "Our users typically save between $150-500 per month. Over decades with compound interest, "
        "that can mean hundreds of thousands in additional wealth!"
    ),
    "closing": (
        "Thank you for using {company}'s Wealth Planning Assistant! Small changes in your spending "
        "habits today can lead to significant wealth tomorrow. If you'd like to create another "
        "projection, just say \"start over\"."
    ),
    "help": (
        "I'm here to help you with:\n"
        "- Understanding your wealth projection\n"
        "- How compound interest grows your money\n"
        "- Seeing how {company} savings add up over time\n"
        "- General savings and budgeting tips\n\n"
        "Say \"start over\" any time to create a new projection."
    ),
    "general": (
        "That's a great question about financial planning! While I can provide general guidance, for "
        "specific advice tailored to your situation, consider consulting with a certified financial "
        "planner. Is there anything specific about your wealth projection I can help clarify?"
    ),
}
