APP_NAME = "fleet"
