"""Loading bundled sprites, spritesheets and sounds (Phaser), with fallbacks."""

SPRITE_LOADER_SNIPPET = """
// ===== PHASER SPRITE & SOUND LOADING PATTERNS =====

// --- Loading images in preload() ---
//   this.load.image('player', '/assets/sprites/platformer/player.png');
//   this.load.image('coin', '/assets/sprites/platformer/coin.png');
//   this.load.image('heart', '/assets/sprites/common/heart.png');

// --- Loading spritesheets (for animation) ---
//   this.load.spritesheet('explosion', '/assets/sprites/shooter/explosion.png', {
//     frameWidth: 64, frameHeight: 64
//   });

// --- Creating animations from spritesheets ---
//   this.anims.create({
//     key: 'explode',
//     frames: this.anims.generateFrameNumbers('explosion', { start: 0, end: 3 }),
//     frameRate: 12, repeat: 0
//   });
//   // Play: sprite.play('explode');

// --- Loading and playing sounds ---
//   this.load.audio('jump', '/assets/sounds/jump.wav');
//   this.load.audio('coin', '/assets/sounds/coin.wav');
//   this.sound.play('coin');
//   this.sound.play('jump', { volume: 0.5 });

// --- Fallback: draw a texture when no sprite fits the theme ---
//   const gfx = this.make.graphics({ add: false });
//   gfx.fillStyle(0xff8800); gfx.fillCircle(16, 16, 14);
//   gfx.generateTexture('pizza', 32, 32); gfx.destroy();

// --- Error-safe loading ---
//   this.load.on('loaderror', (file) => {
//     console.warn('Asset not found:', file.key);
//   });
//   if (this.textures.exists('player')) {
//     player = this.physics.add.sprite(100, 400, 'player');
//   }
"""
