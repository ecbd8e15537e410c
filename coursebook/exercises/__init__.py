"""Reference solutions to the course exercises."""