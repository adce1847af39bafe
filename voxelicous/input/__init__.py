"""Button states, modifiers, keyboard and mouse tracking, action mapping and the input manager."""