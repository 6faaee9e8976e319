# Enforcer Feedback app
